"""Use cases for the formatting feature."""
