"""Command-line interface for element-actions."""
