"""File loaders for workflow definitions and pricing."""
