"""Unit tests for the pattern participants, grouped by family."""
