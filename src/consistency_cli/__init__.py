"""Command-line interface for the consistency linter."""
