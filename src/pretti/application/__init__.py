"""Application services wiring features together."""
