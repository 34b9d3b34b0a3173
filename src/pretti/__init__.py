"""pretti - run prettier over the files you touched."""

__version__ = "0.1.0"
