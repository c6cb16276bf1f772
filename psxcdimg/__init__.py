"""Pack directories into PSXCD.IMG archives with their location and name tables, and extract them."""

__version__ = "0.1.0"