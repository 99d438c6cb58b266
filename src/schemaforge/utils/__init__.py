"""Text utilities for generated SQL."""
