"""Design pattern demonstrations grouped by family."""
