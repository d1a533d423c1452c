# recordtable/src/recordtable/core/exceptions.py
"""
Exceptions raised by recordtable.
"""


class TableError(Exception):
    """Base exception for table generation errors."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class InvalidFieldError(TableError):
    """Raised when a header is requested for a field the record type lacks."""

    def __init__(self, field_name: str, type_name: str):
        super().__init__(f"Invalid field '{field_name}' in {type_name}")
        self.field_name = field_name
        self.type_name = type_name


class RecordTypeError(TableError):
    """Raised when a value cannot be introspected as a record."""

    def __init__(self, type_name: str):
        super().__init__(f"{type_name} is not a dataclass record with get_header()")
        self.type_name = type_name


class OutputWriteError(TableError):
    """Output stream rejected a write."""

    def __init__(self, format_name: str, message: str):
        super().__init__(f"Output format '{format_name}' error: {message}")
        self.format_name = format_name


class ConfigError(TableError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_path: str = None):
        super().__init__(f"Configuration error: {message}")
        self.config_path = config_path


class RecordLoadError(TableError):
    """Records could not be built from an input document."""

    def __init__(self, source: str, message: str):
        super().__init__(f"Cannot load records from {source}: {message}")
        self.source = source
