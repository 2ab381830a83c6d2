"""Partial application with placeholders"""
from itertools import chain, starmap

__all__ = ["PLACEHOLDER", "partial"]


class _Placeholder:
    """Type of the :data:`PLACEHOLDER` singleton"""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "PLACEHOLDER"

    def __reduce__(self):
        return "PLACEHOLDER"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


PLACEHOLDER = _Placeholder()
"""Marks an argument position to be filled in at call time"""


def fill_placeholders(args, fillers):
    """Replace each :data:`PLACEHOLDER` in ``args`` with the next filler,
    then append the fillers left over.

    Raises
    ------
    TypeError
        if there are more placeholders than fillers
    """
    fillers = iter(fillers)
    filled = []
    for index, arg in enumerate(args):
        if arg is PLACEHOLDER:
            try:
                arg = next(fillers)
            except StopIteration:
                raise TypeError(
                    "no argument given for placeholder at position "
                    "{}".format(index)
                ) from None
        filled.append(arg)
    filled.extend(fillers)
    return filled


class partial:
    """Like :func:`functools.partial`,
    but :data:`PLACEHOLDER` arguments reserve positions
    for the positional arguments given at call time.
    Call-time arguments left over are appended.
    Call-time keyword arguments override bound ones.

    Parameters
    ----------
    func: ~typing.Callable
        the callable to apply partially
    *args
        positional arguments, possibly :data:`PLACEHOLDER`
    **kwargs
        keyword arguments.
        These cannot be :data:`PLACEHOLDER`, placeholders are positional only.

    Example
    -------

    >>> fmt = partial("{}-{}-{}-{}".format, 1, PLACEHOLDER, 3)
    >>> fmt(2, 4)
    '1-2-3-4'
    """

    __slots__ = "func", "args", "keywords"

    def __init__(self, func, *args, **kwargs):
        if not callable(func):
            raise TypeError("the first argument must be callable")
        for name, value in kwargs.items():
            if value is PLACEHOLDER:
                raise TypeError(
                    "keyword argument {!r} cannot be a "
                    "placeholder".format(name)
                )
        self.func, self.args, self.keywords = func, args, kwargs

    def __call__(self, *args, **kwargs):
        return self.func(
            *fill_placeholders(self.args, args), **{**self.keywords, **kwargs}
        )

    def __repr__(self):
        arguments = chain(
            map(repr, self.args),
            starmap("{}={!r}".format, self.keywords.items()),
        )
        return "partial({})".format(
            ", ".join(chain([repr(self.func)], arguments))
        )
