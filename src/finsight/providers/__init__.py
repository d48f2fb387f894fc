"""External data providers."""
