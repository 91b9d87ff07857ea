"""Infrastructure adapters package."""
