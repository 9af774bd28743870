"""Custom exceptions for effectgraph.

All custom exceptions inherit from EffectGraphError. Each type carries a
unique error code and optional structured details for programmatic
handling by the host graph engine.

Node evaluation itself never raises for unset inputs; these errors cover
malformed host values, node registration and configuration.
"""

from typing import Any, Optional, Dict, TypeVar, Type

E = TypeVar("E", bound="EffectGraphError")


class EffectGraphError(Exception):
    """
    Base error for effectgraph.

    Args:
        message: Human-readable error message.
        code: Unique error code for programmatic handling.
        details: Optional structured data for debugging or host use.
    """

    error_code: str = "effectgraph.error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message: str = message or self.__class__.__doc__ or "effectgraph error"
        self.code: str = code or self.error_code
        self.details: Dict[str, Any] = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the exception for logging or host diagnostics."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    @classmethod
    def from_exception(
        cls: Type[E],
        exc: Exception,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> E:
        """
        Wrap an arbitrary exception as an EffectGraphError subclass.
        Preserves the original message and attaches the original exception as detail.
        """
        return cls(
            message=str(exc),
            code=code,
            details={**(details or {}), "original_exception": repr(exc)},
        )


class InvalidValueError(EffectGraphError):
    """Raised when a host value cannot be read as the expected graph value."""
    error_code: str = "effectgraph.invalid_value"


class NodeRegistrationError(EffectGraphError):
    """Raised when a node type cannot be registered."""
    error_code: str = "effectgraph.node_registration_error"


class NodeNotFoundError(EffectGraphError, KeyError):
    """Raised when a node type is not registered."""
    error_code: str = "effectgraph.node_not_found"

    def __str__(self) -> str:
        return self.message


class ConfigurationError(EffectGraphError):
    """Raised for configuration or environment errors."""
    error_code: str = "effectgraph.configuration_error"
