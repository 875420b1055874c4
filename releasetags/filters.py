#!/usr/bin/env python3
"""
Include/exclude filter over release filenames

Exclude wins over include. With no include pattern every filename not
excluded is accepted. Both patterns are plain case-insensitive searches;
they are not wrapped with the tag boundary rule.
"""

import re
from typing import Iterable, List, Optional


class ReleaseFilter:
    """Accept or reject filenames by configured patterns"""

    def __init__(self, include: Optional[str] = None, exclude: Optional[str] = None):
        self.include = re.compile(include, re.IGNORECASE) if include else None
        self.exclude = re.compile(exclude, re.IGNORECASE) if exclude else None

    @classmethod
    def from_settings(cls, settings) -> 'ReleaseFilter':
        return cls(settings.regex_include_pattern, settings.regex_exclude_pattern)

    @property
    def active(self) -> bool:
        return self.include is not None or self.exclude is not None

    def accepts(self, filename: str) -> bool:
        if self.exclude is not None and self.exclude.search(filename):
            return False
        if self.include is not None:
            return self.include.search(filename) is not None
        return True

    def apply(self, filenames: Iterable[str]) -> List[str]:
        return [name for name in filenames if self.accepts(name)]
