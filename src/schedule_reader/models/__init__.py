"""Schedule data models."""
