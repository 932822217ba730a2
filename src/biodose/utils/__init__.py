"""Small helpers shared across biodose."""
