"""Journal application package."""
