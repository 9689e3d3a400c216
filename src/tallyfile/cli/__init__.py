"""Command-line interface for tallyfile."""
