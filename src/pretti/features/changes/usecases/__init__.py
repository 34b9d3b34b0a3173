"""Use cases for change discovery."""
