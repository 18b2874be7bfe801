"""Command line interface for running the pattern demonstrations."""
