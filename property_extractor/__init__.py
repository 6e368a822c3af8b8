"""County property appraiser extraction scripts and their shared helpers."""

__version__ = "0.1.0"
