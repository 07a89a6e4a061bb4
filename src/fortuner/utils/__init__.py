"""Fortune file discovery and text helpers."""
