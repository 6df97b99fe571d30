"""
Provides the scoped accesses on which all modify operations are built.

Each access is a context manager. Entering it moves the value out of its
container slot, leaving a hole; exiting it moves the (possibly modified) value
back in, on every exit path. Exceptions raised inside the "with" block are
never suppressed: they propagate once the slot has been restored.

Usage:

with box_hole(box) as ref:
    ref.value.append(42)

with entry_hole(mapping, key) as option:
    option.set(1)

While a hole is open, the slot must not be read or written by anything else
than the block which opened it.
"""

import operator

from modval.box import Box, Ref
from modval.errors import HoleAccessError
from modval.tools import logger


class _Hole(object):
    """
    Type of the HOLE singleton.
    """
    __slots__ = ()

    def __repr__(self):
        return 'HOLE'

    def __reduce__(self):
        return 'HOLE'


HOLE = _Hole()
"""
Marker stored in a mapping slot whose value is moved out.
"""

_absent = object()


# Messages are only formatted when their category is enabled. Logging happens
# before a hole is made and after it is filled again, never while it is open.

def _log_hole(action, kind, key=_absent):
    if logger.enabled('hole'):
        where = kind if key is _absent else '{} {!r}'.format(kind, key)
        logger.log('hole', '{} hole in {}'.format(action, where))


def _log_restore(exc_type, kind, key=_absent):
    if exc_type is not None and logger.enabled('restore'):
        where = kind if key is _absent else '{} {!r}'.format(kind, key)
        logger.log('restore', 'restored {} after {}'.format(
            where, exc_type.__name__
        ))


class _BoxHole(object):
    """
    Moves the value out of a holding Box and back in.

    The block receives a Ref to the value. The box is Empty while the block
    runs.
    """
    def __init__(self, box):
        self.box = box
        self.ref = None

    def __enter__(self):
        ref = Ref(self.box.value)
        _log_hole('opened', 'box')
        self.box.clear()
        self.ref = ref
        return ref

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self.box.put(self.ref.value)
        finally:
            _log_restore(exc_type, 'box')
        _log_hole('closed', 'box')
        return False


class _EntryHole(object):
    """
    Moves the value bound to a key out of a mapping, as an optional value,
    and writes the final presence/value state back.

    The block receives a Box which holds the value bound to the key, or is
    Empty if the key is absent. The final state of the Box is always written
    back, whatever the type of the value:
    - holding: the key is bound to the held value (insert or update);
    - empty: the key is removed if it was present, the mapping is left
      unchanged otherwise.
    """
    def __init__(self, mapping, key):
        self.mapping = mapping
        self.key = key
        self.option = None
        self.was_present = False

    def __enter__(self):
        value = self.mapping.get(self.key, _absent)
        if value is HOLE:
            raise HoleAccessError(
                "key {!r} is already being modified".format(self.key)
            )

        if value is _absent:
            self.option = Box.empty()
        else:
            _log_hole('opened', 'entry', self.key)
            self.mapping[self.key] = HOLE
            self.was_present = True
            self.option = Box.holding(value)

        return self.option

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if self.option.is_holding():
                self.mapping[self.key] = self.option.value
            elif self.was_present:
                del self.mapping[self.key]
        finally:
            _log_restore(exc_type, 'entry', self.key)

        if self.was_present:
            _log_hole('closed', 'entry', self.key)
        return False


class _DefaultEntryHole(object):
    """
    Moves the value bound to a key out of a mapping, binding the key to a
    default value first if it is absent, and writes the final value back.

    The block receives a Ref to the value. The key stays present (bound to
    HOLE) while the block runs. If the default producer raises, the mapping
    is left untouched.
    """
    def __init__(self, mapping, key, default):
        self.mapping = mapping
        self.key = key
        self.default = default
        self.ref = None

    def __enter__(self):
        value = self.mapping.get(self.key, _absent)
        if value is HOLE:
            raise HoleAccessError(
                "key {!r} is already being modified".format(self.key)
            )
        if value is _absent:
            value = self.default()

        ref = Ref(value)
        _log_hole('opened', 'entry', self.key)
        self.mapping[self.key] = HOLE
        self.ref = ref
        return ref

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self.mapping[self.key] = self.ref.value
        finally:
            _log_restore(exc_type, 'entry', self.key)
        _log_hole('closed', 'entry', self.key)
        return False


class _ElementSlot(object):
    """
    Gives direct access to the element at a valid index of a sequence.

    No hole is made: an index-addressable slot is never absent, so the
    element stays in the sequence while the block runs. The block receives a
    Ref to the element itself (not a copy), and whatever it holds at the end
    is stored back at the same index, which allows rebinding immutable
    elements.
    """
    def __init__(self, seq, index):
        self.seq = seq
        self.index = operator.index(index)
        self.ref = None

    def __enter__(self):
        if self.index < 0:
            raise IndexError(
                "index {} is out of range".format(self.index)
            )
        self.ref = Ref(self.seq[self.index])
        return self.ref

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self.seq[self.index] = self.ref.value
        finally:
            _log_restore(exc_type, 'element', self.index)
        return False


def box_hole(box):
    """
    :param Box box: A holding box.
    :raise modval.errors.EmptyBoxError: on enter, if the box is empty.
    :rtype: _BoxHole
    """
    return _BoxHole(box)


def entry_hole(mapping, key):
    """
    :param mapping: A mapping.
    :param object key: The key of the entry.
    :raise modval.errors.HoleAccessError: on enter, if the entry is already
        being modified.
    :rtype: _EntryHole
    """
    return _EntryHole(mapping, key)


def default_entry_hole(mapping, key, default):
    """
    :param mapping: A mapping.
    :param object key: The key of the entry.
    :param () -> object default: Produces the value to start from if the key
        is absent. Only called in that case.
    :raise modval.errors.HoleAccessError: on enter, if the entry is already
        being modified.
    :rtype: _DefaultEntryHole
    """
    return _DefaultEntryHole(mapping, key, default)


def element_slot(seq, index):
    """
    :param seq: A mutable sequence.
    :param int index: An index in [0, len(seq)).
    :raise IndexError: on enter, if the index is out of range.
    :rtype: _ElementSlot
    """
    return _ElementSlot(seq, index)
