#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/exceptions.py
"""Custom exceptions for the cardkit library.

This module defines specialized exception classes for the error conditions
that can occur while defining card node types, importing HTML, serializing
documents and rendering cards.

Exception Hierarchy
-------------------
- CardkitError (base exception)

  - ConfigurationError (bad node type definitions)

  - ValidationError (parameter/option validation)

  - ParsingError (HTML import failures in strict mode)

  - RenderingError (output generation failures)

  - SerializationError (document JSON load/dump failures)
    - UnknownNodeTypeError (record type not registered)

Notes
-----
Import matchers and card renderers never raise for missing or malformed
data; they decline or degrade to an empty container. The exceptions below
are reserved for programming errors and explicitly strict entry points.

"""

from typing import Any


class CardkitError(Exception):
    """Base exception class for all cardkit-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(CardkitError):
    """Exception raised when a node type is defined with an invalid schema.

    Raised at definition time only, never while importing or rendering.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        Name of the offending schema field
    parameter_value : any, optional
        The value that was rejected
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ValidationError(CardkitError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ParsingError(CardkitError):
    """Exception raised when HTML input cannot be imported.

    Only raised by the document importer when strict mode is enabled.

    Parameters
    ----------
    message : str
        Description of the parsing error
    original_error : Exception, optional
        The original exception that caused this error

    """


class RenderingError(CardkitError):
    """Exception raised when a document cannot be rendered.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    node_type : str, optional
        Type tag of the node being rendered when the failure occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


class SerializationError(CardkitError):
    """Exception raised when a document JSON structure cannot be loaded or dumped.

    Parameters
    ----------
    message : str
        Description of the serialization error
    original_error : Exception, optional
        The original exception that caused this error

    """


class UnknownNodeTypeError(SerializationError):
    """Exception raised when a record names a node type that is not registered.

    Parameters
    ----------
    node_type : str
        The unregistered type tag
    message : str, optional
        Custom error message

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the unknown node type error."""
        if message is None:
            message = f"Unknown node type '{node_type}'. Register it before loading documents that use it."
        super().__init__(message)
        self.node_type = node_type
