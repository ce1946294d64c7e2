"""CLI commands for wiretext."""
