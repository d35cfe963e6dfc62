"""Command-line interface for pacprune."""
