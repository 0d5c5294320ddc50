"""Errors raised by connector runtime lookups."""


class ConnectorRuntimeError(Exception):
    """Base error for resource lookup and property resolution."""
    pass


class InvalidArgumentError(ConnectorRuntimeError):
    """A required identifying argument (descriptor, interface name) is missing."""
    pass


class ResourceNotFoundError(ConnectorRuntimeError):
    """No definition matched the requested interface/class key."""

    def __init__(self, interface_name: str, class_name=None):
        self.interface_name = interface_name
        self.class_name = class_name
        message = f"No resource with interface [{interface_name}] found"
        if class_name is not None:
            message += f" for class [{class_name}]"
        super().__init__(message)


class IntrospectionError(ConnectorRuntimeError):
    """A bean class could not be loaded or instantiated for introspection."""
    pass
