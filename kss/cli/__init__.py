"""Command line interface for kss."""
