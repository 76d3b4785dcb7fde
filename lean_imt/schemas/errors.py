"""
Lean IMT - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for tree operations.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Every tree exception is raised before any state is mutated, so catching
one always leaves the tree exactly as it was before the call.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Leaf Errors
    ZERO_LEAF = "ZERO_LEAF"
    DUPLICATE_LEAF = "DUPLICATE_LEAF"
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"

    # Sibling Path Errors
    INSUFFICIENT_SIBLING_PATH = "INSUFFICIENT_SIBLING_PATH"
    INVALID_SIBLING_PATH = "INVALID_SIBLING_PATH"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


def describe_node(node: Any) -> str:
    """Render a node for error details (hex for bytes, repr otherwise)."""
    if isinstance(node, (bytes, bytearray)):
        return "0x" + bytes(node).hex()
    return repr(node)


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class IMTError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary as data (CLI JSON output,
    logs) instead of as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.DUPLICATE_LEAF],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class IMTException(Exception):
    """
    Base exception for all Lean IMT errors.

    This exception carries structured error information and can be
    converted to an IMTError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "IMT_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> IMTError:
        """Convert this exception to an IMTError model."""
        return IMTError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ZeroLeafException(IMTException):
    """Raised when the ZERO sentinel is offered as a leaf."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message="Leaf cannot be zero",
            code=ErrorCodes.ZERO_LEAF,
            details=details,
            retryable=False,
        )


class DuplicateLeafException(IMTException):
    """Raised when a leaf value already occupies a position."""

    def __init__(
        self,
        leaf: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["leaf"] = describe_node(leaf)
        super().__init__(
            message="Leaf already exists",
            code=ErrorCodes.DUPLICATE_LEAF,
            details=full_details,
            retryable=False,
        )
        self.leaf = leaf


class LeafNotFoundException(IMTException):
    """Raised when a referenced leaf is not in the tree."""

    def __init__(
        self,
        leaf: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["leaf"] = describe_node(leaf)
        super().__init__(
            message="Leaf does not exist",
            code=ErrorCodes.LEAF_NOT_FOUND,
            details=full_details,
            retryable=False,
        )
        self.leaf = leaf


class InsufficientSiblingPathException(IMTException):
    """Raised when the sibling path runs out before the root is reached."""

    def __init__(
        self,
        level: int,
        supplied: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["level"] = level
        full_details["supplied"] = supplied
        super().__init__(
            message=f"Not enough sibling nodes: missing sibling at level {level}",
            code=ErrorCodes.INSUFFICIENT_SIBLING_PATH,
            details=full_details,
            retryable=False,
        )


class InvalidSiblingPathException(IMTException):
    """
    Raised when the root recomputed from a sibling path does not match.

    Retryable: a stale path can be refreshed and the update resubmitted.
    """

    def __init__(
        self,
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message="Wrong sibling nodes",
            code=ErrorCodes.INVALID_SIBLING_PATH,
            details=full_details,
            retryable=True,
        )


class ConfigurationException(IMTException):
    """Raised when configuration names something that does not exist."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=details,
            retryable=False,
        )
