"""Core exception hierarchy.

This module defines base error and warning types used across the linter
to report malformed names, rule violations, unreadable stylesheets,
invalid configuration, and plugin loading issues in a structured way.
"""

from os import linesep
from typing import TYPE_CHECKING, Any, TypedDict

from yaml import dump
from yaml.error import MarkedYAMLError

if TYPE_CHECKING:
    from importlib.metadata import EntryPoint
    from typing import Self

if TYPE_CHECKING:
    from pydantic import ValidationError

SNIPPET_ELLIPSIS = f' ...{linesep}'
SNIPPET_INDENT = 2

FORMAT_FILENAME = '<unicode string>'
FORMAT_INDENT = 4


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Name of the source file where the error occurred.
    filename: str | None

    #: Line number in the source file (1-based).
    line_num: int | None
    #: Column number in the source file (1-based).
    column_num: int | None

    #: Name token the error relates to.
    name: str | None

    #: Underlying exception that triggered formatting.
    error: Exception | None

    #: Data element associated with the error.
    element: Any


class ErrorFormatter:
    """Utility class for formatting linter errors.

    This formatter is responsible for producing human-readable
    error messages with optional source location and YAML-based
    contextual snippets.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location and data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)
        message += cls.get_snippet_string(context, indent=FORMAT_INDENT * 2)

        return message.rstrip()

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format source location information.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string including filename, line,
            column, and the offending name when available.
        """
        indent = cls._ensure_indent(indent)

        filename = context.get('filename')
        if not filename:
            filename = FORMAT_FILENAME

        message = f'{indent}in "{filename}"'
        if (line_num := context.get('line_num')) is not None:
            message += f', line {line_num}'
            if (column_num := context.get('column_num')) is not None:
                message += f', column {column_num}'
        message += linesep

        if name := context.get('name'):
            message += f'{indent}on name {name!r}{linesep}'

        return message

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, *,
                           indent: str | int | None = None) -> str:
        """Generate a formatted snippet illustrating the error context.

        Args:
            context: Error context containing element or exception data.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted multi-line snippet string, or an empty string
            if no snippet data is available.
        """
        indent = cls._ensure_indent(indent)

        if (error := context.get('error')) and isinstance(error, MarkedYAMLError):
            snippet = error.problem_mark.get_snippet(indent=0) if error.problem_mark else None
            return cls._make_indent(snippet or '', indent)

        if element := context.get('element'):
            snippet = f'{indent}{SNIPPET_ELLIPSIS}'
            snippet += cls._make_yaml(element, indent)
            return snippet + linesep

        return ''

    @classmethod
    def _make_yaml(cls, value: Any, indent: str = '') -> str:  # noqa: ANN401
        """Serialize a value to a YAML-formatted string.

        Args:
            value: Plain data to serialize.
            indent: Optional indentation prefix.

        Returns:
            A YAML-formatted string representation of the value.
        """
        data = dump(
            value,
            indent=SNIPPET_INDENT,
            sort_keys=False,
        )

        return cls._make_indent(data, indent)

    @staticmethod
    def _make_indent(value: str, indent: str) -> str:
        """Apply indentation to a multi-line string.

        Empty or whitespace-only lines are omitted.

        Args:
            value: Original multi-line string.
            indent: Indentation prefix.

        Returns:
            Indented string.
        """
        if not indent:
            return value

        return linesep.join(
            f'{indent}{line}'
            for line in value.splitlines()
            if line.strip()
        )

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation input.

        Args:
            indent: Indentation as string or number of spaces.

        Returns:
            A string consisting of spaces or the provided string.
        """
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class StyleWarning(UserWarning):
    """Warning emitted for non-fatal naming style findings.

    Used for names that are tokenizable and pass every hard rule but
    still go against the guide, such as nesting descendants deeper
    than the configured depth.
    """


class PluginWarning(UserWarning):
    """Warning emitted for non-fatal plugin-related issues.

    This warning is used when a rules plugin cannot be loaded or
    processed, but strict plugin mode is not enabled.
    """


class NamingError(Exception, ErrorFormatter):
    """Base exception for all linter errors.

    All custom exceptions raised by the library inherit from this class
    to allow unified error handling by callers.
    """

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Optional error context with location and data.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String representation."""
        return self.format(self.message, self.context)


class MalformedName(NamingError):
    """Error raised when a name cannot be tokenized at all.

    Examples are characters outside the allowed set, empty segments,
    or more than one modifier segment.
    """

    def __init__(self, name: str, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize a tokenizer error.

        Args:
            name: Raw name that failed to tokenize.
            message: Human-readable error description.
            context: Optional error context with location and data.
        """
        self.name = name

        super().__init__(message, context=context)


class RuleViolation(NamingError):
    """Error raised when a tokenized name breaks a grammar rule.

    The violated rule identifier is kept in `rule` so that callers can
    filter or group violations.
    """

    def __init__(self, name: str, rule: str, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize a rule violation.

        Args:
            name: Raw name that violates the rule.
            rule: Qualified identifier of the violated rule.
            message: Human-readable description of the violation.
            context: Optional error context with location and data.
        """
        self.name = name
        self.rule = rule

        super().__init__(message, context=context)


class ScanError(NamingError):
    """Error raised when a stylesheet cannot be read.

    A scan error aborts the scan of a single file only; batch callers
    record it and continue with the next file.
    """

    @classmethod
    def from_os_error(cls, filename: str, error: OSError) -> 'Self':
        """Create a scan error from an I/O failure.

        Args:
            filename: Path of the file being scanned.
            error: Exception raised while reading the file.

        Returns:
            ScanError with the file attached as location context.
        """
        message = 'Can not read stylesheet'
        if error.strerror:
            message += f': {error.strerror}'

        return cls(message, context=ErrorContext(filename=filename, error=error))


class ConfigError(NamingError):
    """Error raised when linter configuration is invalid."""

    @classmethod
    def from_yaml_error(cls, error: MarkedYAMLError) -> 'Self':
        """Create a configuration error from a YAML parsing failure.

        Args:
            error: Exception raised by the YAML parser.

        Returns:
            ConfigError representing the YAML parsing failure.
        """
        error_context = ErrorContext(error=error)
        if mark := error.problem_mark:
            error_context.update(
                filename=mark.name,
                line_num=mark.line + 1,
                column_num=mark.column + 1,
            )

        message = 'Invalid YAML'
        if error.problem:
            message += f'{linesep}{' ' * FORMAT_INDENT}{error.problem}'

        return cls(message, context=error_context)

    @classmethod
    def from_pydantic_error(cls, error: 'ValidationError', *,
                            data: dict[str, Any] | None = None,
                            filename: str | None = None) -> 'Self':
        """Create a configuration error from a Pydantic validation failure.

        The first reported issue becomes the message; the offending
        option and its value are attached as a YAML snippet.

        Args:
            error: ValidationError raised by the settings model.
            data: Raw option values that were validated.
            filename: Configuration file the values were read from.

        Returns:
            ConfigError representing the validation failure.
        """
        error_context = ErrorContext(filename=filename, error=error)

        for item in error.errors(include_url=False, include_input=False):
            key = item['loc'][0] if item['loc'] else None
            if data and isinstance(key, str) and key in data:
                error_context['element'] = {key: data[key]}
            message = f'Invalid option {key!r}: {item['msg']}' if key else item['msg']
            return cls(message, context=error_context)

        return cls('Invalid configuration', context=error_context)


class PluginError(NamingError):
    """Error raised for fatal plugin-related failures.

    This exception is raised when a plugin entry point is invalid,
    misconfigured, or fails to load in strict mode.
    """

    def __init__(self, message: str, *,
                 entrypoint: 'EntryPoint | None' = None) -> None:
        """Initialize a plugin error.

        Args:
            message: Human-readable error description.
            entrypoint: Optional plugin entry point associated with the error.
        """
        self.entrypoint = entrypoint

        super().__init__(message)
