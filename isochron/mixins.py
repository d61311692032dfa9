#! /usr/bin/env python
"""Mixin classes shared by the isochron value types"""

import operator


def _comparison(op):
    def compare(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return op(self.sortkey(), other.sortkey())
    compare.__name__ = "__%s__" % op.__name__
    compare.__doc__ = "Compares sort keys with operator.%s" % op.__name__
    return compare


class SortableMixin(object):

    """Mixin class for ordered values

    Classes must define a method :meth:`sortkey` that returns a key
    value representing the instance, e.g., a Moment returns a tuple of
    (epoch_seconds, nanoseconds).  All six comparison operators and
    __hash__ are then defined on that key.

    Instances only compare with instances of the same class (or its
    subclasses), for other objects the comparisons return
    NotImplemented so == is False and < raises TypeError."""

    __slots__ = ()

    def sortkey(self):
        raise NotImplementedError

    __eq__ = _comparison(operator.eq)
    __ne__ = _comparison(operator.ne)
    __lt__ = _comparison(operator.lt)
    __le__ = _comparison(operator.le)
    __gt__ = _comparison(operator.gt)
    __ge__ = _comparison(operator.ge)

    def __hash__(self):
        return hash(self.sortkey())


class FrozenMixin(object):

    """Mixin class for immutable values

    Derived classes declare their fields in __slots__ and set them
    during construction with :meth:`_freeze`.  Any later attempt to set
    or delete an attribute raises AttributeError."""

    __slots__ = ()

    def _freeze(self, **kwargs):
        for k, v in kwargs.items():
            object.__setattr__(self, k, v)

    def __setattr__(self, name, value):
        raise AttributeError(
            "%s is immutable, can't set %s" % (type(self).__name__, name))

    def __delattr__(self, name):
        raise AttributeError(
            "%s is immutable, can't delete %s" % (type(self).__name__, name))
