"""binbreak: read the bits, type the number before the timer runs out."""

__version__ = "0.3.0"
