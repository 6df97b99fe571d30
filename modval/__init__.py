"""
In-place modification of the values held by boxes, mappings and sequences.

Each operation hands the value to a closure as the only live reference to it,
and restores the container on every exit path, including when the closure
raises.
"""

from modval.box import Box, Ref
from modval.errors import (
    ModifyError, UnsupportedContainerError, EmptyBoxError, HoleAccessError
)
from modval.holes import (
    HOLE, box_hole, entry_hole, default_entry_hole, element_slot
)
from modval.modify_ops.optional_ops import modify_if_present
from modval.modify_ops.mapping_ops import modify, modify_or_insert
from modval.modify_ops.sequence_ops import modify_at

__all__ = [
    'Box', 'Ref',
    'ModifyError', 'UnsupportedContainerError', 'EmptyBoxError',
    'HoleAccessError',
    'HOLE', 'box_hole', 'entry_hole', 'default_entry_hole', 'element_slot',
    'modify_if_present', 'modify', 'modify_or_insert', 'modify_at',
]
