"""rosterctl — load and inspect semicolon-delimited staff rosters."""

__version__ = "0.1.0"
