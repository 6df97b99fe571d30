"""
Provides the in-place modification of the value bound to a key of a mapping.

Both operations write the final value back to the mapping after the
modification, whether the value is an immutable object (int, tuple, ...) that
was rebound, or a mutable object that was modified in place.
"""

from modval.capabilities import Capability
from modval.holes import default_entry_hole, entry_hole
from modval.tools.logger import logged


@logged('trace')
def modify_or_insert(mapping, key, default, f):
    """
    Calls f with the value bound to the given key, binding the key to a
    default value first if it is absent. The key is bound to the final value
    once f returns or raises, even if f leaves the default value untouched.

    The default producer is only called if the key is absent. If it raises,
    the mapping is left unchanged and f is not called.

    For example:

        hues = {"Heliotrope": 296, "Coral": 16}

        def shift(ref):
            ref.value += 2

        modify_or_insert(hues, "Coral", lambda: 16, shift)
        modify_or_insert(hues, "Cerise", lambda: 328, shift)
        # hues == {"Heliotrope": 296, "Coral": 18, "Cerise": 330}

    :param mapping: The mapping to modify.
    :param object key: The key of the value to modify.
    :param () -> object default: Produces the value to start from if the key
        is absent.
    :param modval.box.Ref -> object f: The modification.
    :return: The result of f.
    :rtype: object
    """
    Capability.HasKeyedAccess.require(mapping, 'modify_or_insert')
    with default_entry_hole(mapping, key, default) as ref:
        return f(ref)


@logged('trace')
def modify(mapping, key, f):
    """
    Calls f with a Box holding the value bound to the given key, or an empty
    Box if the key is absent. Once f returns or raises, the state of the Box
    is written back:
    - holding a value: the key is bound to it (inserted or updated);
    - empty, key initially present: the key is removed;
    - empty, key initially absent: the mapping is unchanged.

    To modify the value only if the key is present, use modify_if_present on
    the Box:

        modify(hues, "Coral", lambda option: modify_if_present(option, shift))

    :param mapping: The mapping to modify.
    :param object key: The key of the value to modify.
    :param modval.box.Box -> object f: The modification.
    :return: The result of f.
    :rtype: object
    """
    Capability.HasKeyedAccess.require(mapping, 'modify')
    with entry_hole(mapping, key) as option:
        return f(option)
