"""Fortune file loading."""
