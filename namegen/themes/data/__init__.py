"""JSON data for the built-in themes."""
