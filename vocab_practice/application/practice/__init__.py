"""Practice module application layer."""
