#!/usr/bin/env python3
"""
Boundary-aware pattern compiler

Every tag pattern in the system goes through compile_fragment(). The fragment
is wrapped so a match:
  - starts at the beginning of the string or right after a separator
    (whitespace, '[', '(', '_', '-', '.', ',')
  - ends at the end of the string or right before a separator
    (whitespace, ')', ']', '_', '.', '-', ',')

so "480p" never fires inside "480prep" or "sub480".

LANGUAGE fragments additionally refuse to match when directly followed by a
subtitle marker ("Japanese.Subs" is a subtitle track, not spoken Japanese).
"""

import re
from dataclasses import dataclass
from enum import Enum

from releasetags.exceptions import PatternCompileError


# Match must not be preceded by anything other than a separator
BOUNDARY_PREFIX = r'(?<![^\s\[(_\-.,])'
# ...and must be followed by a separator or end-of-string
BOUNDARY_SUFFIX = r'(?=[\s)\]_.\-,]|$)'
# Optional separator + sub/subs/subtitle/subtitles
SUBTITLE_GUARD = r'(?![ .\-_]?sub(?:title)?s?)'


class PatternKind(Enum):
    """How a fragment is wrapped before compiling"""
    GENERIC = 'generic'
    LANGUAGE = 'language'


@dataclass(frozen=True)
class FragmentPattern:
    """A compiled, boundary-aware matcher built from one fragment"""
    source: str
    kind: PatternKind
    regex: re.Pattern

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    @property
    def case_insensitive(self) -> bool:
        return bool(self.regex.flags & re.IGNORECASE)


def wrap_fragment(fragment: str, kind: PatternKind = PatternKind.GENERIC) -> str:
    """Return the full expression for a fragment without compiling it"""
    if kind is PatternKind.LANGUAGE:
        body = f'(?:{fragment}){SUBTITLE_GUARD}'
    else:
        body = fragment
    return f'{BOUNDARY_PREFIX}({body}){BOUNDARY_SUFFIX}'


def compile_fragment(fragment: str, kind: PatternKind = PatternKind.GENERIC) -> FragmentPattern:
    """
    Compile a fragment into a FragmentPattern

    Args:
        fragment: Raw expression, e.g. 'hdr[ .\\-_]?10'
        kind: GENERIC or LANGUAGE

    Returns:
        FragmentPattern (immutable, reusable across threads)

    Raises:
        PatternCompileError: fragment is empty or not a valid expression
    """
    if not isinstance(fragment, str) or not fragment.strip():
        raise PatternCompileError(str(fragment), 'empty pattern')

    try:
        # The fragment alone must be well formed; otherwise an unbalanced ')'
        # could close the wrapper group and escape the boundary rule
        re.compile(fragment)
        regex = re.compile(wrap_fragment(fragment, kind), re.IGNORECASE)
    except re.error as e:
        raise PatternCompileError(fragment, str(e)) from e

    return FragmentPattern(source=fragment, kind=kind, regex=regex)
