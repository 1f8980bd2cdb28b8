"""Command-line interface for vercmp."""
