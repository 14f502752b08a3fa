"""
exceptions.py
Errors raised when the raw table does not match what the pipeline expects.
Missing or unreadable files surface as the builtin FileNotFoundError / OSError.
"""

from typing import Any, Optional


class FormatError(ValueError):
    """Malformed CSV structure or a value that cannot be coerced to numeric."""

    def __init__(self, message: str, column: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.column = column
        self.value = value


class DataAssumptionError(ValueError):
    """A column violates a precondition of a later stage (e.g. exam results not 0/1)."""

    def __init__(self, message: str, column: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.column = column
        self.value = value
