"""PantheonFS command group for a multi-command host tool."""

__version__ = "0.1.0"
