"""Presentation layer: public API."""
