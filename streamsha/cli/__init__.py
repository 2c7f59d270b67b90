"""Command-line interface for streamsha."""
