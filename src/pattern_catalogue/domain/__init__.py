"""Domain layer shared by all pattern demonstrations."""
