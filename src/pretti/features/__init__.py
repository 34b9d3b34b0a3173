"""Feature packages for pretti."""
