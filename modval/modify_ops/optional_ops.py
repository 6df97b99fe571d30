"""
Provides the in-place modification of the payload of a Box.
"""

from modval.capabilities import Capability
from modval.holes import box_hole
from modval.tools.logger import logged


@logged('trace')
def modify_if_present(box, f):
    """
    Calls f with the payload of the given box if the box is holding one.
    Does nothing if the box is empty: f is not called.

    The payload is moved out of the box for the duration of the call, so that
    the box does not keep a second reference to it, and is moved back once f
    returns or raises.

    For example:

        def double(ref):
            ref.value *= 2

        possible_number = Box.holding(42)
        modify_if_present(possible_number, double)
        # possible_number == Box.holding(84)

        no_number = Box.empty()
        modify_if_present(no_number, double)
        # no_number == Box.empty()

    :param modval.box.Box box: The box to modify.
    :param modval.box.Ref -> object f: The modification. Mutates the payload
        in place or rebinds "ref.value".
    :return: The result of f, or None if the box is empty.
    :rtype: object
    """
    Capability.IsBox.require(box, 'modify_if_present')
    if box.is_empty():
        return None

    with box_hole(box) as ref:
        return f(ref)
