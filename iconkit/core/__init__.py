"""Shared infrastructure: logging."""
