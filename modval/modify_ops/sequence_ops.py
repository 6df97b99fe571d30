"""
Provides the in-place modification of an element of a mutable sequence.
"""

from modval.capabilities import Capability
from modval.holes import element_slot
from modval.tools.logger import logged


@logged('trace')
def modify_at(seq, index, f):
    """
    Calls f with the element at the given index of the sequence.

    Unlike the box and mapping modifications, no hole is made: the slot at a
    valid index is never absent, so the element is accessed in place. f
    receives a Ref to the element itself, and the final "ref.value" is stored
    back at the same index when f returns or raises.

    For example:

        streets = ["Adams Street", "Butler", "Channing Street"]

        def append_street(ref):
            ref.value += " Street"

        modify_at(streets, 1, append_street)
        # streets[1] == "Butler Street"

    :param seq: The sequence to modify.
    :param int index: The position of the element, in [0, len(seq)).
    :param modval.box.Ref -> object f: The modification.
    :raise IndexError: if the index is out of range. The sequence is left
        unchanged and f is not called.
    :return: The result of f.
    :rtype: object
    """
    Capability.HasIndexedAccess.require(seq, 'modify_at')
    with element_slot(seq, index) as ref:
        return f(ref)
