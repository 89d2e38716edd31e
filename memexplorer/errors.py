"""Exceptions raised by memexplorer.

Only failures of the explorer itself are wrapped here. Exceptions raised by
caller-supplied predicates, visitors and size oracles are never caught and
reach the caller unchanged.
"""

from typing import Any, Optional


class ExplorerError(Exception):
    """Base class for all memexplorer errors."""
    pass


class NullRootError(ExplorerError, ValueError):
    """Raised when exploration is requested for an absent (None) root."""

    def __init__(self, message: str = "Cannot explore an object graph rooted at None"):
        super().__init__(message)


class ConfigurationError(ExplorerError, ValueError):
    """Raised when an ExplorerConfig fails validation."""
    pass


class IntrospectionError(ExplorerError):
    """Raised when the reference adapter cannot enumerate an object's children.

    The chain that led to the offending object is kept for diagnostics, and
    the original exception is available both as ``cause`` and through the
    usual ``__cause__`` link.

    Attributes:
        chain: Chain whose value could not be introspected
        cause: The exception raised by the adapter
    """

    def __init__(self, chain: Any, cause: Optional[BaseException] = None):
        self.chain = chain
        self.cause = cause
        value_type = type(chain.value).__name__
        message = f"Cannot enumerate references of {value_type} at {chain.path_string()}"
        if cause is not None:
            message = f"{message}: {cause!r}"
        super().__init__(message)
