class BinbreakError(Exception):
    """Base class for errors raised by binbreak."""


class FrontendError(BinbreakError):
    """The terminal or window cannot be used; fatal for the process."""


class StoreError(BinbreakError):
    """High-score file could not be read or written."""
