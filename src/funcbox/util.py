"""Miscellaneous tools for a functional programming style"""
from functools import partial

from .containers import strictly_in

__all__ = [
    "identity",
    "map_nots",
    "map",
    "when_nots",
    "when",
    "tree_path",
    "new",
]

_EMPTIES = ("", b"", [], (), {})
_ZEROES = (0, 0.0)


def identity(obj):
    """identity function, returns input unmodified"""
    return obj


def _nots(none, false, empty, zero):
    nots = []
    if none:
        nots.append(None)
    if false:
        nots.append(False)
    if empty:
        nots.extend(_EMPTIES)
    if zero:
        nots.extend(_ZEROES)
    return nots


def map_nots(value, fn=None, *nots, null_on_not=False, func=False):
    """Map a value through a function,
    unless the value is one of ``nots``.

    Values are compared strictly: they must be of the same type.
    So with ``nots`` of ``(0,)``, ``False`` and ``0.0`` are still mapped.

    Parameters
    ----------
    value
        the value to map
    fn: ~typing.Callable or None
        the mapping function. ``None`` means :func:`identity`
    *nots
        the values which are not mapped
    null_on_not: bool
        whether to return ``None`` instead of ``value``
        when it is not mapped
    func: bool
        whether ``fn=None`` means the value is not mapped either.
        Only useful in combination with ``null_on_not``.

    Returns
    -------
    ~typing.Any
        the mapped value, ``value`` itself or ``None``
    """
    if strictly_in(value, nots) or (func and fn is None):
        return None if null_on_not else value
    return value if fn is None else fn(value)


def map(
    value,
    fn=None,
    *,
    null_on_not=False,
    func=False,
    none=True,
    false=False,
    empty=False,
    zero=False
):
    """Map a value through a function,
    unless it is one of the selected falsy values.
    By default, only ``None`` is not mapped.

    Parameters
    ----------
    value
        the value to map
    fn: ~typing.Callable or None
        the mapping function. ``None`` means :func:`identity`
    null_on_not: bool
        whether to return ``None`` for a value which is not mapped
    func: bool
        whether ``fn=None`` means the value is not mapped either
    none: bool
        whether ``None`` is not mapped
    false: bool
        whether ``False`` is not mapped
    empty: bool
        whether empty strings, bytes, lists, tuples and dicts are not mapped
    zero: bool
        whether ``0`` and ``0.0`` are not mapped

    Example
    -------

    >>> map("", str.upper, empty=True)
    ''
    >>> map("", len)
    0
    """
    return map_nots(
        value,
        fn,
        *_nots(none, false, empty, zero),
        null_on_not=null_on_not,
        func=func
    )


def when_nots(test, value, fn=None, *nots):
    """Like :func:`when`, with the falsy values given as ``nots``."""
    if strictly_in(test, nots):
        return None
    if callable(value):
        value = value(test)
    return value if fn is None else fn(value)


def when(
    test, value, fn=None, *, none=True, false=True, empty=False, zero=False
):
    """Return ``value`` if ``test`` is not one of the selected falsy values,
    ``None`` otherwise.
    Like ``fn(value) if test else None``,
    without the need for a temporary variable for ``test``.

    Parameters
    ----------
    test
        the value to test
    value
        the value to return. If callable,
        it is called with ``test`` and its result is returned.
    fn: ~typing.Callable or None
        optional function to map the (called) value through
    none: bool
        whether ``None`` is falsy
    false: bool
        whether ``False`` is falsy
    empty: bool
        whether empty strings, bytes, lists, tuples and dicts are falsy
    zero: bool
        whether ``0`` and ``0.0`` are falsy

    Example
    -------

    >>> settings = {"name": "", "mode": "fast"}
    >>> when(settings.get("mode"), str.upper, empty=True)
    'FAST'
    >>> when(settings.get("name"), str.upper, empty=True) is None
    True
    """
    return when_nots(test, value, fn, *_nots(none, false, empty, zero))


def tree_path(node, get_parent, while_=None):
    """Iterate over the ancestors of a node and the node itself,
    from the top down.

    Parameters
    ----------
    node
        the starting node, may be ``None``
    get_parent: ~typing.Callable[[T], T or None]
        returns the parent of a node, or ``None`` at the top
    while_: ~typing.Callable[[T], bool] or None
        optional check whether to keep climbing.
        The first node for which it is false
        is excluded, together with its ancestors.

    Returns
    -------
    ~typing.Iterator[T]
        the nodes, top-most first

    Example
    -------

    >>> parents = {"c": "b", "b": "a"}
    >>> list(tree_path("c", parents.get))
    ['a', 'b', 'c']
    """
    path = []
    while node is not None and (while_ is None or while_(node)):
        path.append(node)
        node = get_parent(node)
    yield from reversed(path)


def new(cls):
    """Create a factory function for a class

    Parameters
    ----------
    cls: type
        the class to instantiate

    Returns
    -------
    ~typing.Callable
        a function passing its arguments to ``cls``
    """
    return partial(cls)
