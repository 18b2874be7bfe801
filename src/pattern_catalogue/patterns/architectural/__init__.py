"""Architectural patterns - Dependency Injection, Event Sourcing, Repository."""
