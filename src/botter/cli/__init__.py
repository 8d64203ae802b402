"""Command-line interface for Botter."""
