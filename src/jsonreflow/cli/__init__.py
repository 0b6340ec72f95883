"""Command-line interface for jsonreflow."""
