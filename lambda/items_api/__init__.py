"""Lambda code for the Items service (read and write handlers)."""
