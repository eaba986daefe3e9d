"""Generate Go helper methods for API types from a JSON API description."""
