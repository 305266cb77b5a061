"""Command-line interface for WordWorld."""
