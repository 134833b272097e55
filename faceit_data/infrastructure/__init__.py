"""Infrastructure layer - HTTP client and request construction."""
