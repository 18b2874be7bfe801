"""Infrastructure layer - cross-cutting technical services."""
