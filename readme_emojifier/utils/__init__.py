"""Shared helpers: logging, input validation and Markdown cleanup."""
