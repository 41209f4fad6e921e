"""Pure inventory domain model: no I/O, no clock, no frameworks."""
