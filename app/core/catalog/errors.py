"""
Errors raised by the catalog layer.
"""


class DataAccessFailure(RuntimeError):
    """Raised when the movie source cannot complete a fetch.

    The original driver exception, if any, is available as ``__cause__``.
    """
