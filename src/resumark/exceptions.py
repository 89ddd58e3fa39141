#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the resumark library.

Exception Hierarchy
-------------------
- ResumarkError (base exception)

  - ValidationError (parameter/option/tree validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - FormatError (unknown source or target format)

  - ParsingError (input could not be decoded)

  - RenderingError (output could not be written)

Code generators never raise for values of the document model; the only
failure in the core is a tree parser receiving text that is not JSON.

"""

from typing import Any


class ResumarkError(Exception):
    """Root of every error raised by resumark.

    Parameters
    ----------
    message : str
        What went wrong, suitable for showing to a user
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ResumarkError):
    """Raised for a bad option, context or config value, or a malformed tree in strict mode.

    Parameters
    ----------
    message : str
        What is wrong with the value
    parameter_name : str, optional
        Option, config section or tree field the value belongs to
    parameter_value : any, optional
        Offending value
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Store the message and the offending parameter."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Raised when a parser or renderer receives another component's options.

    Parameters
    ----------
    component_name : str
        Format name of the parser or renderer, e.g. ``"latex"``
    expected_type : type
        Options class the component accepts
    received_type : type
        Options class it was given
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Build the message from the expected and received options classes."""
        if message is None:
            message = (
                f"The {component_name} component takes {expected_type.__name__}, "
                f"not {received_type.__name__}"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FormatError(ResumarkError):
    """Raised for a source or target format name with no parser or renderer.

    Parameters
    ----------
    format_type : str
        Requested format name
    supported_formats : list of str, optional
        Format names that would have worked

    """

    def __init__(
        self,
        format_type: str,
        supported_formats: list[str] | None = None,
        message: str | None = None,
    ):
        """Build the message, listing the known formats when given."""
        if message is None:
            message = f"Unknown format '{format_type}'"
            if supported_formats:
                message += f" (choose from: {', '.join(supported_formats)})"
        super().__init__(message)
        self.format_type = format_type
        self.supported_formats = supported_formats or []


class ParsingError(ResumarkError):
    """Raised when source text cannot be decoded at all.

    Parameters
    ----------
    message : str
        Decoder diagnostic
    parsing_stage : str, optional
        Step that failed, e.g. ``"json_parsing"``
    original_error : Exception, optional
        Decoder exception, such as ``json.JSONDecodeError``

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Store the diagnostic and the failing step."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(ResumarkError):
    """Raised when rendered output cannot be written to its destination.

    Parameters
    ----------
    message : str
        Why the write failed
    output_path : str, optional
        File path that could not be written

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Store the message and the destination path."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path
