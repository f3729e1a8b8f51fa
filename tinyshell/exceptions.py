"""
Custom exceptions for the shell.
"""


class BaseShellError(Exception):
    """Base exception class for shell errors."""

    pass


class ConfigurationError(BaseShellError):
    """Exception raised for configuration errors."""

    pass


class ParseError(BaseShellError):
    """Exception raised when an input line holds no command."""

    pass


class UnknownCommandError(BaseShellError):
    """Exception raised when a command name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"{name}: command not found")
        self.name = name


class InputError(BaseShellError):
    """Base exception for input lines that are dropped before parsing."""

    pass


class EncodingError(InputError):
    """Exception raised when an input line cannot be decoded."""

    pass


class LineTooLongError(InputError):
    """Exception raised when an input line exceeds the configured length."""

    def __init__(self, limit: int):
        super().__init__(f"Input line longer than {limit} bytes was discarded")
        self.limit = limit


class HandlerError(BaseShellError):
    """Base exception for failures inside a command handler."""

    pass


class InvalidArgumentsError(HandlerError):
    """Exception raised when a command is invoked with bad arguments."""

    pass


class EnvironmentFailureError(HandlerError):
    """Exception raised when the process environment cannot be queried."""

    pass


class FilesystemError(HandlerError):
    """Exception raised for directory listing and file writing errors."""

    pass


class NetworkError(HandlerError):
    """Exception raised for connection, DNS and timeout errors."""

    pass


class HttpStatusError(HandlerError):
    """Exception raised when a server answers with a non-success status."""

    def __init__(self, status_code: int, url: str = ""):
        message = f"HTTP error {status_code}"
        if url:
            message = f"{message} for {url}"
        super().__init__(message)
        self.status_code = status_code
        self.url = url
