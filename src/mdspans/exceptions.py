#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdspans library.

This module defines specialized exception classes for the error conditions
that can occur while building rule sets, loading configuration and parsing
input text.

Exception Hierarchy
-------------------
- MdSpansError (base exception)

  - ValidationError (parameter/option validation)
    - InputTooLargeError (input exceeds the configured size limit)

  - ConfigurationError (config files, theme loading)
    - RuleConfigurationError (malformed rule patterns)

  - ParsingError (no rule matched a position of the input)

  - RenderingError (output generation failures)

"""

from typing import Any


class MdSpansError(Exception):
    """Base exception class for all mdspans-specific errors.

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


class ValidationError(MdSpansError):
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


class InputTooLargeError(ValidationError):
    """Exception raised when a parse input exceeds ``max_input_length``.

    Parameters
    ----------
    length : int
        Length of the rejected input
    limit : int
        Configured maximum length

    """

    def __init__(self, length: int, limit: int):
        """Initialize with the offending length and the configured limit."""
        super().__init__(
            f"Input length {length} exceeds the configured maximum of {limit} characters",
            parameter_name="max_input_length",
            parameter_value=length,
        )
        self.length = length
        self.limit = limit


class ConfigurationError(MdSpansError):
    """Exception raised for unreadable or invalid configuration.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file involved, if any
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class RuleConfigurationError(ConfigurationError):
    """Exception raised when a rule is constructed from a malformed pattern.

    Raised at construction time, never deferred to parse time.

    Parameters
    ----------
    pattern : str
        Source of the pattern that failed to compile
    original_error : Exception, optional
        The underlying ``re.error``

    """

    def __init__(self, pattern: str, original_error: Exception | None = None):
        """Initialize with the failing pattern source."""
        detail = f": {original_error}" if original_error else ""
        super().__init__(f"Invalid rule pattern {pattern!r}{detail}", original_error=original_error)
        self.pattern = pattern


class ParsingError(MdSpansError):
    """Exception raised when no rule in the active rule set matches the input.

    Rule sets are expected to end with a catch-all text rule; this error
    signals that precondition was not met.

    Parameters
    ----------
    message : str
        Description of the failure
    source : str
        The full source being parsed
    position : int
        Offset into ``source`` at which no rule matched

    """

    def __init__(self, message: str, source: str, position: int):
        """Initialize with the source and failing offset."""
        super().__init__(f"{message} at offset {position}")
        self.source = source
        self.position = position


class RenderingError(MdSpansError):
    """Exception raised when a node tree cannot be rendered."""

    pass
