"""Domain layer: API member model and exceptions."""
