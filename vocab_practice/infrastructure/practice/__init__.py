"""Practice module infrastructure layer."""
