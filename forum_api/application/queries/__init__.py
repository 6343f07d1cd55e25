"""Read use cases."""
