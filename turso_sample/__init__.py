"""Copy a random sample of a remote libSQL table into a local SQLite file."""

__version__ = "0.1.0"
