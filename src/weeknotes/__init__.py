"""weeknotes: short notes filed under days of the week."""

__version__ = "0.1.0"
