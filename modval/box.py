"""
Provides the Box type, which holds zero or one value, and the Ref type, which
is the scratch location handed to mutation closures.

Python has no "inout" parameters: a closure cannot rebind a variable of its
caller. Closures therefore receive a Ref (or, for optional slots, a Box) and
communicate the final value through it. The object referenced is never
copied: mutating it in place and rebinding "ref.value" are both supported.
"""

from modval.errors import EmptyBoxError, HoleAccessError


_nothing = object()


class Box(object):
    """
    Represents zero or one value. A Box is either Empty or Holding a value.

    Note that None is a legal payload: Box.holding(None) is not empty. Use
    Box.of to build a box from a value where None means "absent".
    """
    __slots__ = ('_value',)

    def __init__(self, value=_nothing):
        self._value = value

    @staticmethod
    def empty():
        """
        :rtype: Box
        """
        return Box()

    @staticmethod
    def holding(value):
        """
        :param object value: The payload.
        :rtype: Box
        """
        return Box(value)

    @staticmethod
    def of(value):
        """
        Builds a box which is empty if the given value is None, holding it
        otherwise.

        :param object | None value: The optional payload.
        :rtype: Box
        """
        return Box() if value is None else Box(value)

    def is_empty(self):
        return self._value is _nothing

    def is_holding(self):
        return self._value is not _nothing

    @property
    def value(self):
        """
        The payload of this box. Raises EmptyBoxError if the box is empty.
        Assigning to it is equivalent to calling "set".
        """
        if self._value is _nothing:
            raise EmptyBoxError("empty box has no value")
        return self._value

    @value.setter
    def value(self, value):
        self._value = value

    def get(self, default=None):
        """
        Returns the payload, or the given default if the box is empty.
        """
        return default if self._value is _nothing else self._value

    def set(self, value):
        """
        Replaces the content of this box, which becomes Holding(value).
        """
        self._value = value

    def clear(self):
        """
        Makes this box Empty, dropping its payload if any.
        """
        self._value = _nothing

    def take(self):
        """
        Moves the payload out of this box, leaving it Empty.

        :raise EmptyBoxError: if the box is already empty.
        :rtype: object
        """
        value = self.value
        self._value = _nothing
        return value

    def put(self, value):
        """
        Moves a value into this box, which must be Empty.

        :raise HoleAccessError: if the box already holds a value, which would
            otherwise be silently dropped.
        """
        if self._value is not _nothing:
            raise HoleAccessError(
                "cannot move a value into a box that is not empty"
            )
        self._value = value

    def __eq__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return self._value == other._value

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    __hash__ = None

    def __repr__(self):
        if self._value is _nothing:
            return 'Box.empty()'
        return 'Box.holding({!r})'.format(self._value)


class Ref(object):
    """
    A mutable reference to a single value. This is the scratch location
    through which a closure accesses the value it modifies.
    """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return 'Ref({!r})'.format(self.value)
