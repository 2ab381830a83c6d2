"""Fluent threading of a value through function calls"""
import logging
from functools import partial

from .placeholder import PLACEHOLDER

__all__ = ["Pipe"]

logger = logging.getLogger(__name__)


def _uses_item_access(key, item_access):
    return item_access or (isinstance(key, int) and not isinstance(key, bool))


class Pipe:
    """Wraps a value and pipes it through any callable which transforms it.
    Every step replaces :attr:`value` and returns the pipe itself,
    so steps can be chained. The result is read from :attr:`value`.

    Parameters
    ----------
    value
        the initial value

    Example
    -------

    >>> from datetime import datetime
    >>> (Pipe("2025-01-01t00:00:00")
    ...  (str.upper)                            # '2025-01-01T00:00:00'
    ...  (datetime.fromisoformat)                # datetime(2025, 1, 1, 0, 0)
    ...  .strftime("%Y_%m_%d")                   # '2025_01_01'
    ...  (str.split, Pipe.PLACEHOLDER, "_", 1)   # ['2025', '01_01']
    ...  .get(0)                                 # '2025'
    ...  (int)                                   # 2025
    ...  .value)
    2025

    Note
    ----
    Methods of the value are called through attribute access.
    Names defined on :class:`Pipe` itself
    (``value``, ``new``, ``get``, ``set``, ``call``)
    need :meth:`call` instead.
    """

    __slots__ = "value"

    PLACEHOLDER = PLACEHOLDER

    def __init__(self, value):
        self.value = value

    def __call__(self, func, *args, **kwargs):
        """Call ``func`` with the value in place of the first
        :data:`~funcbox.PLACEHOLDER` in ``args``.
        Without one there, the first keyword argument
        which is :data:`~funcbox.PLACEHOLDER` is replaced instead.
        Otherwise the value is appended to ``args``.

        Returns
        -------
        Pipe
            the pipe itself
        """
        args = list(args)
        position = next(
            (i for i, arg in enumerate(args) if arg is PLACEHOLDER), None
        )
        if position is not None:
            args[position] = self.value
        else:
            name = next(
                (k for k, v in kwargs.items() if v is PLACEHOLDER), None
            )
            if name is None:
                args.append(self.value)
            else:
                kwargs[name] = self.value
        logger.debug("piping %r through %r", self.value, func)
        self.value = func(*args, **kwargs)
        return self

    def new(self, cls, *args, **kwargs):
        """Create an instance of ``cls`` from the value.
        Arguments are handled as in :meth:`__call__`.

        Returns
        -------
        Pipe
            the pipe itself
        """
        return self(cls, *args, **kwargs)

    def call(self, name, *args, **kwargs):
        """Call method ``name`` of the value,
        the result becomes the new value.

        Returns
        -------
        Pipe
            the pipe itself
        """
        method = getattr(self.value, name)
        logger.debug("piping %r through method %r", self.value, name)
        self.value = method(*args, **kwargs)
        return self

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        return partial(self.call, name)

    def get(self, key, item_access=False):
        """Replace the value by one of its items or attributes.

        Parameters
        ----------
        key: str or int
            the item key or attribute name.
            Integers always select items.
        item_access: bool
            whether to select an item instead of an attribute

        Returns
        -------
        Pipe
            the pipe itself
        """
        if _uses_item_access(key, item_access):
            self.value = self.value[key]
        else:
            self.value = getattr(self.value, key)
        return self

    def set(self, key, new, item_access=False):
        """Set an item or attribute of the value.
        The value itself stays the same object.

        Parameters
        ----------
        key: str or int
            the item key or attribute name.
            Integers always select items.
        new
            the value to store
        item_access: bool
            whether to set an item instead of an attribute

        Returns
        -------
        Pipe
            the pipe itself
        """
        if _uses_item_access(key, item_access):
            self.value[key] = new
        else:
            setattr(self.value, key, new)
        return self

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return "Pipe({!r})".format(self.value)
