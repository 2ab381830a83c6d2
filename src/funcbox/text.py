"""String helpers"""

__all__ = ["trim_prefix", "trim_suffix"]


def trim_prefix(string, prefix):
    """Remove a prefix from a string, if it starts with it.

    Example
    -------

    >>> trim_prefix("Hello all", "Hello ")
    'all'
    """
    return string[len(prefix):] if string.startswith(prefix) else string


def trim_suffix(string, suffix):
    """Remove a suffix from a string, if it ends with it.

    Example
    -------

    >>> trim_suffix("Hello all", " all")
    'Hello'
    """
    if suffix and string.endswith(suffix):
        return string[: -len(suffix)]
    return string
