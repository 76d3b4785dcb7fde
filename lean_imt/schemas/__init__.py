"""
Lean IMT schemas: error codes, error models and exceptions.
"""
from .errors import (
    ErrorCodes,
    IMTError,
    IMTException,
    ZeroLeafException,
    DuplicateLeafException,
    LeafNotFoundException,
    InsufficientSiblingPathException,
    InvalidSiblingPathException,
    ConfigurationException,
    describe_node,
)

__all__ = [
    "ErrorCodes",
    "IMTError",
    "IMTException",
    "ZeroLeafException",
    "DuplicateLeafException",
    "LeafNotFoundException",
    "InsufficientSiblingPathException",
    "InvalidSiblingPathException",
    "ConfigurationException",
    "describe_node",
]
