"""Fluent method calls on a wrapped object"""
import logging
from functools import partial

__all__ = ["With"]

logger = logging.getLogger(__name__)


class With:
    """Wraps an object so calls to its methods can be chained.
    Return values of the methods are discarded,
    each call returns the wrapper itself.

    Parameters
    ----------
    object
        the object to wrap

    Example
    -------

    >>> With([3, 1]).append(2).sort().object
    [1, 2, 3]

    Note
    ----
    Methods of the object are called through attribute access.
    Names defined on :class:`With` itself
    (``object``, ``new``, ``call``)
    need :meth:`call` instead.
    """

    __slots__ = "object"

    def __init__(self, object):
        self.object = object

    @classmethod
    def new(cls, factory, *args, **kwargs):
        """Create an object and wrap it

        Parameters
        ----------
        factory: ~typing.Callable
            the class (or other callable) creating the object
        *args
            positional arguments for ``factory``
        **kwargs
            keyword arguments for ``factory``
        """
        return cls(factory(*args, **kwargs))

    def call(self, name, *args, **kwargs):
        """Call method ``name`` of the object, discarding its result.

        Returns
        -------
        With
            the wrapper itself
        """
        logger.debug("calling %r on %r", name, self.object)
        getattr(self.object, name)(*args, **kwargs)
        return self

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        # fail on lookup, not only when called
        getattr(self.object, name)
        return partial(self.call, name)

    def __str__(self):
        return str(self.object)

    def __repr__(self):
        return "With({!r})".format(self.object)
