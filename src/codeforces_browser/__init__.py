"""Terminal browser for Codeforces problems."""

__version__ = "0.1.0"
