"""Operator-facing scripts for the inventory manager."""
