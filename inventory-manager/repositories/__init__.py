"""Persistence for the inventory: audit log and snapshot sinks, storage settings."""
