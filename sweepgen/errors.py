"""Exception types raised by SweepGen."""


class SweepgenError(Exception):
    """Base class for all SweepGen errors."""


class ConfigError(SweepgenError):
    """Configuration file could not be read or parsed."""


class GridSpecError(SweepgenError, ValueError):
    """Grid specification is missing fields or holds invalid values."""


class TickParseError(SweepgenError, ValueError):
    """A tick row could not be parsed under a strict parsing policy."""

    def __init__(self, line_no: int, field: str, value: str):
        self.line_no = line_no
        self.field = field
        self.value = value
        super().__init__(f"line {line_no}: invalid {field} value {value!r}")
