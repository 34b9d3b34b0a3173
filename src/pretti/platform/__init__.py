"""Platform adapters: logging and process execution."""
