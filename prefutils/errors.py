"""Exception types raised by prefutils."""


class PrefListIndexError(IndexError):
    """Raised when a PrefList index falls outside the valid range."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"index {index} out of range for list of length {count}")
        self.index = index
        self.count = count


class PrefStoreError(Exception):
    """Raised for store failures detected by prefutils itself."""


class PrefConfigError(PrefStoreError):
    """Raised when a store or the application is misconfigured."""
