"""Custom exception hierarchy for fieldtree configuration handling.

Conversion itself never raises; these exceptions are reserved for loading
and validating conversion settings.
"""


class FieldTreeError(Exception):
    """Base exception for all fieldtree errors.

    All fieldtree-specific exceptions inherit from this class, enabling
    callers to catch everything the package raises with one clause.
    """

    pass


class ConfigError(FieldTreeError):
    """Exception raised for configuration errors.

    Raised when conversion settings cannot be read, parsed or validated.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(FieldTreeError):
    """Exception raised when a settings file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")
