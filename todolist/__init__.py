"""A command-line to-do list that adds and lists tasks kept in a CSV file."""

__version__ = "0.1.0"