"""Domain objects for change discovery."""
