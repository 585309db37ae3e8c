"""Product event tracking service."""
