#!/usr/bin/env python3
"""
Exceptions raised while building or configuring pattern tables

Classification itself never raises. Everything here surfaces at startup,
when patterns are compiled or overrides are merged.
"""

from typing import Optional


class ReleaseTagsError(Exception):
    """Base class for all releasetags configuration errors"""


class PatternCompileError(ReleaseTagsError):
    """A fragment or override pattern is not a valid expression"""

    def __init__(self, pattern: str, reason: str = '',
                 label: Optional[str] = None, position: Optional[int] = None):
        self.pattern = pattern
        self.reason = reason
        self.label = label
        self.position = position

        where = []
        if position is not None:
            where.append(f"#{position}")
        if label:
            where.append(f"label '{label}'")
        prefix = f"Invalid regex pattern ({', '.join(where)})" if where else "Invalid regex pattern"
        message = f"{prefix}: {pattern}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class PatternLimitError(ReleaseTagsError):
    """More override patterns were supplied than the configured maximum"""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Too many regex sort patterns: got {count}, max is {limit}"
        )


class DuplicateLabelError(ReleaseTagsError):
    """The same label appears more than once in one override batch"""

    def __init__(self, label: str, positions):
        self.label = label
        self.positions = tuple(positions)
        super().__init__(
            f"Duplicate override label '{label}' at positions "
            f"{', '.join(str(p) for p in self.positions)}"
        )


class ConfigError(ReleaseTagsError):
    """A settings value could not be read or coerced"""
