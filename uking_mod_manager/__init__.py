"""U-King Mod Manager presentation shell."""

__version__ = "0.1.0"
