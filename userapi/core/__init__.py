"""Cross-cutting settings, logging and error types."""
