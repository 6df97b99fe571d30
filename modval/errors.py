"""
Exceptions raised by modval itself.

Exceptions raised by the mutation closures, by default-value producers and by
the underlying containers (e.g. IndexError) are never wrapped: they propagate
to the caller unchanged, once the container has been restored.
"""


class ModifyError(Exception):
    """
    Base class of the errors raised by modval.
    """
    pass


class UnsupportedContainerError(ModifyError, TypeError):
    """
    Raised when a container does not provide the access capability that an
    operation requires. Nothing is read from or written to the container.
    """
    def __init__(self, container, operation, required):
        """
        :param object container: The rejected container.
        :param str operation: The name of the operation that was attempted.
        :param str required: A description of the missing capability.
        """
        self.container = container
        self.operation = operation
        super(UnsupportedContainerError, self).__init__(
            "{} requires {}, got {}".format(
                operation, required, type(container).__name__
            )
        )


class EmptyBoxError(ModifyError, ValueError):
    """
    Raised when reading or taking the value of an empty Box.
    """
    pass


class HoleAccessError(ModifyError, RuntimeError):
    """
    Raised when a slot whose value is currently moved out for a modification
    is accessed by another modification, or written to while the hole is
    open.
    """
    pass
