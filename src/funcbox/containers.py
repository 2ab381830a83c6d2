"""Helpers for picking, searching and folding containers.

A container is either a :class:`~collections.abc.Mapping`,
whose entries are its ``(key, value)`` items,
or any other iterable, whose entries are ``(index, value)`` pairs.
"""
import typing as t
from collections.abc import Mapping

__all__ = [
    "Entry",
    "entries",
    "pick",
    "find_by",
    "reduce",
    "kvjoin",
    "first",
    "find",
]


class Entry(t.NamedTuple):
    """A key/value pair of a container.
    ``Entry(None, None)`` signals that nothing was found.

    Example
    -------

    >>> key, value = first({"a": 1})
    >>> key, value
    ('a', 1)
    """

    key: t.Any
    value: t.Any


_NOTHING = Entry(None, None)


class _Missing:
    __slots__ = ()

    def __repr__(self):
        return "<missing>"


_MISSING = _Missing()


def entries(container):
    """Iterate the ``(key, value)`` pairs of a container.

    Parameters
    ----------
    container: ~typing.Mapping or ~typing.Iterable
        A mapping (yielding its items)
        or an iterable (yielding ``(index, value)`` pairs).

    Returns
    -------
    ~typing.Iterator[~typing.Tuple[~typing.Any, ~typing.Any]]
    """
    if isinstance(container, Mapping):
        return iter(container.items())
    return enumerate(container)


def strictly_in(obj, candidates):
    """Whether ``obj`` is one of ``candidates``,
    matching only on equal values of the exact same type.
    So ``1``, ``1.0`` and ``True`` are all different,
    unlike with the ``in`` operator."""
    return any(
        type(obj) is type(other) and obj == other for other in candidates
    )


def pick(container, *keys):
    """Create a dict with only the entries whose key is one of ``keys``.

    Parameters
    ----------
    container: ~typing.Mapping or ~typing.Iterable
        the source container
    *keys
        the keys of the entries to retain

    Returns
    -------
    dict
        the retained entries, in container order

    Example
    -------

    >>> pick({"a": 1, "b": 2, "c": 3}, "c", "a", "x")
    {'a': 1, 'c': 3}
    """
    return {k: v for k, v in entries(container) if strictly_in(k, keys)}


def find_by(container, predicate, return_key=False):
    """Search for the first value for which ``predicate(value, key)``
    is truthy.

    Parameters
    ----------
    container: ~typing.Mapping or ~typing.Iterable
        the source container
    predicate: ~typing.Callable[[~typing.Any, ~typing.Any], bool]
        called with every value and its key, until it matches
    return_key: bool
        whether to return the key instead of the value

    Returns
    -------
    ~typing.Any
        the found value (or key), or ``None`` if nothing matched
    """
    for key, value in entries(container):
        if predicate(value, key):
            return key if return_key else value
    return None


def reduce(iterable, callback, initial=_MISSING, on_empty=False):
    """Like :func:`functools.reduce`,
    but the callback receives the key of each element as well.

    Parameters
    ----------
    iterable: ~typing.Mapping or ~typing.Iterable
        the elements to reduce
    callback: ~typing.Callable[[~typing.Any, ~typing.Any, ~typing.Any], \
~typing.Any]
        called as ``callback(carry, value, key)``
    initial
        the optional initial value.
        If not given, the first element is the initial value
        and ``callback`` is not called for it.
    on_empty: bool
        if true, ``initial`` is only returned for an empty iterable
        and is not used as the starting value otherwise.

    Returns
    -------
    ~typing.Any
        the reduced value, or ``initial`` for an empty iterable

    Raises
    ------
    ValueError
        if the iterable is empty and no initial value was given
    """
    has_initial = initial is not _MISSING
    seeded = has_initial and not on_empty
    carry = initial if seeded else _MISSING
    for key, value in entries(iterable):
        if carry is _MISSING:
            carry = value
        else:
            carry = callback(carry, value, key)
    if carry is _MISSING:
        if has_initial:
            return initial
        raise ValueError("no elements and no initial value")
    return carry


def kvjoin(data, sep=", ", kv_sep="="):
    """Like :meth:`str.join`, but outputs the keys as well.

    Parameters
    ----------
    data: ~typing.Mapping or ~typing.Iterable
        the entries to join
    sep: str
        the separator between entries
    kv_sep: str
        the separator between a key and its value

    Example
    -------

    >>> kvjoin({"a": 1, "b": 2})
    'a=1, b=2'
    """
    return sep.join(
        "{}{}{}".format(key, kv_sep, value) for key, value in entries(data)
    )


def first(iterable):
    """The first entry of a container.

    Returns
    -------
    Entry
        the first key and value, or ``Entry(None, None)`` if empty
    """
    for key, value in entries(iterable):
        return Entry(key, value)
    return _NOTHING


def find(container, *keys):
    """The first entry (in container order) whose key is one of ``keys``.

    Returns
    -------
    Entry
        the found key and value, or ``Entry(None, None)``
    """
    for key, value in entries(container):
        if strictly_in(key, keys):
            return Entry(key, value)
    return _NOTHING
