"""
Error taxonomy for the kubectl simulator.

Every error carries the complete, user-visible message. The executor turns
these into failed ExecutionResults; none of them escape execute().
"""

from typing import Optional

SUPPORTED_ACTIONS = (
    "get",
    "describe",
    "apply",
    "delete",
    "cluster-info",
    "version",
    "api-resources",
)

# api-resources is left out of the hint, as kubectl's own help does
SUGGESTED_ACTIONS = SUPPORTED_ACTIONS[:-1]


class KubectlError(Exception):
    """Base class for every simulated kubectl error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCommandPrefixError(KubectlError):
    """Command does not start with kubectl."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or 'Invalid command: Only kubectl commands are supported. Command must start with "kubectl".'
        )


class CommandRequiredError(InvalidCommandPrefixError):
    """Command string is empty."""

    def __init__(self):
        super().__init__("Error: command is required")


class MissingActionError(KubectlError):
    """Bare ``kubectl`` with no action."""

    def __init__(self):
        super().__init__(
            f"Error: kubectl command is required. Try: {', '.join(SUGGESTED_ACTIONS)}"
        )


class UnknownActionError(KubectlError):
    """Action is not one the simulator supports."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(
            f'Error: unknown command "{action}". '
            f"Supported commands: {', '.join(SUPPORTED_ACTIONS)}"
        )


class MissingResourceError(KubectlError):
    """get without a resource type."""

    def __init__(self):
        super().__init__("Error: resource type is required (e.g., pods, services, deployments)")


class UnknownResourceError(KubectlError):
    """Resource type is not in the catalog."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(
            f'Error: unknown resource type "{resource}". '
            'Use "kubectl api-resources" for a complete list.'
        )


class MissingResourceOrNameError(KubectlError):
    """describe/delete without both a resource type and a name."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(
            "Error: resource type and name are required "
            f"(e.g., kubectl {action} pod my-pod)"
        )


class NotFoundError(KubectlError):
    """Named resource is absent from the catalog."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f'Error from server (NotFound): {kind} "{name}" not found')


class NotImplementedResourceError(KubectlError):
    """describe for a kind that has no describe rendering."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Error: describe command not fully implemented for {resource}")


class InternalExecutionError(KubectlError):
    """Unexpected fault while building output."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Error executing command: {cause}")
