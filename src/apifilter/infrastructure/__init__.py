"""Infrastructure layer: filters and diagnostics."""
