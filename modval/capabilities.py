"""
Provides the Capability class, used to test whether a container supports the
accesses an operation needs before the operation touches it.
"""

from collections.abc import Mapping

from modval.box import Box
from modval.errors import UnsupportedContainerError


class Capability(object):
    """
    A capability object wraps a predicate on a container.
    It is used to test whether a container implements a certain feature.

    For example:
    - The IsBox capability is True for instances of modval.box.Box.

    - The HasKeyedAccess capability is True for every container type which
      defines "get", "__setitem__" and "__delitem__", such as dict,
      OrderedDict, defaultdict or any MutableMapping.
    """
    def __init__(self, container_predicate, description):
        """
        :param object -> bool container_predicate: A predicate.
        :param str description: What the predicate requires, in words. Used
            in error messages.
        """
        self.container_predicate = container_predicate
        self.description = description

    def __call__(self, container):
        return self.container_predicate(container)

    def require(self, container, operation):
        """
        Raises an UnsupportedContainerError if the given container does not
        have this capability.

        :param object container: The container to test.
        :param str operation: The name of the operation which requires this
            capability.
        """
        if not self(container):
            raise UnsupportedContainerError(
                container, operation, self.description
            )

    @staticmethod
    def _has_methods(description, *names):
        """
        Returns the capability that is True if and only if the type of the
        container defines all the given methods.

        :param str description: The description of the capability.
        :param *str names: The names of the required methods.
        :rtype: Capability
        """
        return Capability(
            lambda container: _type_defines(type(container), names),
            description
        )

    @staticmethod
    def _if_all(capabilities):
        """
        Returns the capability that is True if and only if all given
        capabilities are.

        :param list[Capability] capabilities: The capabilities to test.
        :rtype: Capability
        """
        return Capability(
            lambda container: all(c(container) for c in capabilities),
            " and ".join(c.description for c in capabilities)
        )

    # Predefine built-in capabilities so they are available for completions
    # by IDEs.
    HasMethods, IfAll = None, None
    IsBox, HasKeyedAccess, HasIndexedAccess = None, None, None


def _type_defines(tpe, names):
    return all(callable(getattr(tpe, name, None)) for name in names)


# Capability constructors
Capability.HasMethods = staticmethod(Capability._has_methods)
Capability.IfAll = staticmethod(Capability._if_all)

# Container capabilities
Capability.IsBox = Capability(
    lambda container: isinstance(container, Box),
    "a Box"
)
Capability.HasKeyedAccess = Capability.HasMethods(
    "a mapping with get, __setitem__ and __delitem__",
    'get', '__setitem__', '__delitem__'
)
Capability.HasIndexedAccess = Capability.IfAll([
    Capability.HasMethods(
        "a sequence with __getitem__, __setitem__ and __len__",
        '__getitem__', '__setitem__', '__len__'
    ),
    Capability(
        lambda container: not isinstance(container, Mapping),
        "a container which is not a mapping"
    )
])
