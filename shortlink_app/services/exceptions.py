"""
Errors raised by the shortener service and its store.

"Not found" is not an error: lookups return None for that.
"""


class ShortenerError(Exception):
    """Base class for all shortener errors"""


class InvalidUrlError(ShortenerError):
    """The submitted url is not an absolute url with a scheme and a host"""

    def __init__(self, message: str = "Invalid url, check that the url is valid and try again."):
        super().__init__(message)


class StoreError(ShortenerError):
    """
    Any failure coming from the persistent store.
    
    str() of the error is the backend's human readable message, the
    original exception is kept as ``__cause__``.
    """


class StoreConflictError(StoreError):
    """An insert violated a uniqueness constraint (id or url)"""
