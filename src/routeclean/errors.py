"""
Exception classes raised by routeclean.
"""

class RouteCleanError(Exception):
    """Base exception for route cleaning errors."""
    pass

class ConfigurationError(RouteCleanError):
    """Exception for invalid filter configuration values."""
    pass

class UnsupportedInputError(RouteCleanError):
    """Exception for input sources no registered reader can handle."""
    def __init__(self, source: str):
        super().__init__(f"Unable to handle input source: {source}")
        self.source = source

class InputFormatError(RouteCleanError):
    """Exception for input files missing the expected columns."""
    def __init__(self, message: str, missing_columns=None):
        super().__init__(message)
        self.missing_columns = missing_columns

class UnsupportedFormatError(RouteCleanError):
    """Exception for output formats no registered writer can produce."""
    def __init__(self, fmt: str):
        super().__init__(f"Unsupported output format: {fmt}")
        self.fmt = fmt

class WindowOverflowError(RouteCleanError):
    """Exception for pushing a point into a full window."""
    pass
