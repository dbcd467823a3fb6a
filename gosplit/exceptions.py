"""Custom exceptions for gosplit.

This module defines the hierarchy of exceptions raised while splitting a Go
source file, so that callers can tell a bad invocation apart from an
unparseable input or a failed write.
"""


class GoSplitError(Exception):
    """Base exception for all gosplit errors.

    All exceptions raised by gosplit inherit from this class, making it easy
    to catch every splitting failure with a single except clause.

    Example:
        try:
            splitter.split('handlers.go', 3)
        except GoSplitError as e:
            print(f"gosplit error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class UsageError(GoSplitError):
    """The tool was invoked with invalid arguments."""

    pass


class ParseError(GoSplitError):
    """The Go source could not be parsed.

    Attributes:
        source: Path (or label) of the source that failed to parse.
        line: 1-based line of the first syntax error, if known.
        column: 1-based column of the first syntax error, if known.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        source: str,
        details: str | None = None,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ):
        self.source = source
        self.details = details
        self.line = line
        self.column = column
        self.cause = cause
        location = source
        if line is not None:
            location += f':{line}'
            if column is not None:
                location += f':{column}'
        message = f"Failed to parse '{location}'"
        if details:
            message += f': {details}'
        if cause:
            message += f': {cause}'
        super().__init__(message)


class EmptyInputError(GoSplitError):
    """The source file has no function declarations to distribute.

    Attributes:
        source: Path of the source file.
    """

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No functions found in '{source}'")


class DirectoryReadError(GoSplitError):
    """The destination directory could not be listed.

    Attributes:
        directory: The directory that was being listed.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, directory: str, cause: Exception | None = None):
        self.directory = directory
        self.cause = cause
        message = f"Failed to read directory '{directory}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class WriteError(GoSplitError):
    """An output file could not be created or written.

    Files written for earlier groups are left in place.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ConfigurationError(GoSplitError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
