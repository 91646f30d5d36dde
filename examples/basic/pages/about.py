"""About page."""
