"""Single-user, line-oriented task list manager backed by a local JSON file."""

__version__ = "0.1.0"
