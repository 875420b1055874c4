#!/usr/bin/env python3
"""
Custom sort/tier patterns supplied from configuration

Token format is 'label<::>pattern', whitespace separated:

    Remux_T1<::>remux.*-MyGroup  Anime<::>(?:sub|dub)bed  foo[ .]?bar

A token without the delimiter (or with an empty label) is positional and
gets the label 'Custom <n>', n being its 1-based position in the list.

Merging is fail-closed: every override is validated before the tables are
touched, and the caller always gets either a complete new tables value or
an exception.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple, Union

from releasetags.constants import OVERRIDE_DELIMITER, LANGUAGES, DEFAULT_MAX_SORT_PATTERNS
from releasetags.exceptions import DuplicateLabelError, PatternCompileError, PatternLimitError
from releasetags.patterns import FragmentPattern, PatternKind, compile_fragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverridePattern:
    """One configured override token"""
    label: str
    pattern: str
    position: int  # 1-based index in the configured list


def positional_label(position: int) -> str:
    return f"Custom {position}"


def parse_override_token(token: str, position: int) -> OverridePattern:
    if OVERRIDE_DELIMITER in token:
        label, pattern = token.split(OVERRIDE_DELIMITER, 1)
        label = label.strip()
    else:
        label, pattern = '', token
    return OverridePattern(label=label or positional_label(position), pattern=pattern, position=position)


def parse_override_tokens(tokens: Iterable[str]) -> List[OverridePattern]:
    """Parse already-split tokens (e.g. a YAML list, where labels may contain spaces)"""
    return [parse_override_token(token, position)
            for position, token in enumerate(tokens, 1)]


def parse_override_string(raw: Optional[str]) -> List[OverridePattern]:
    """
    Split a whitespace-separated override string into OverridePatterns

    Args:
        raw: e.g. 'Web_T1<::>web.*-GRP custom-only', None or '' for no overrides

    Returns:
        List of OverridePattern in configured order (not yet validated)
    """
    if not raw:
        return []
    return parse_override_tokens(raw.split())


def validate_overrides(overrides: Iterable[OverridePattern],
                       max_patterns: int = DEFAULT_MAX_SORT_PATTERNS
                       ) -> Tuple[Tuple[OverridePattern, FragmentPattern], ...]:
    """
    Check count, labels and syntax of an override batch

    Order of checks: count against max_patterns (before anything is
    compiled), duplicate labels, then each pattern compiled as a language
    pattern in configured order.

    Raises:
        PatternLimitError: more than max_patterns overrides
        DuplicateLabelError: a label repeats within the batch
        PatternCompileError: first pattern that fails to compile
    """
    overrides = list(overrides)
    if len(overrides) > max_patterns:
        raise PatternLimitError(len(overrides), max_patterns)

    positions = defaultdict(list)
    for override in overrides:
        positions[override.label].append(override.position)
    for label, seen_at in positions.items():
        if len(seen_at) > 1:
            raise DuplicateLabelError(label, seen_at)

    compiled = []
    for override in overrides:
        try:
            pattern = compile_fragment(override.pattern, PatternKind.LANGUAGE)
        except PatternCompileError as e:
            raise PatternCompileError(
                override.pattern, e.reason, label=override.label, position=override.position
            ) from e
        compiled.append((override, pattern))

    return tuple(compiled)


def merge_overrides(tables, overrides: Union[str, Iterable[OverridePattern], None],
                    max_patterns: int = DEFAULT_MAX_SORT_PATTERNS):
    """
    Merge overrides into the language/tier category of tables

    A label equal to an existing entry replaces that entry's pattern in
    place, keeping its precedence slot. New labels are appended after the
    built-in entries in configured order.

    Args:
        tables: CategoryTables to start from (never modified)
        overrides: raw override string or OverridePattern iterable
        max_patterns: maximum number of overrides accepted

    Returns:
        New CategoryTables (tables itself when there is nothing to merge)
    """
    if overrides is None or isinstance(overrides, str):
        overrides = parse_override_string(overrides)

    compiled = validate_overrides(overrides, max_patterns)
    if not compiled:
        return tables

    languages = tables[LANGUAGES]
    entries = list(languages.entries)
    index = {label: i for i, (label, _) in enumerate(entries)}

    replaced = 0
    for override, pattern in compiled:
        if override.label in index:
            entries[index[override.label]] = (override.label, pattern)
            replaced += 1
            logger.debug(f"Override #{override.position} replaces '{override.label}'")
        else:
            entries.append((override.label, pattern))

    logger.info(
        f"Merged {len(compiled)} custom sort patterns "
        f"({replaced} replaced, {len(compiled) - replaced} appended)"
    )
    return tables.replace_category(replace(languages, entries=tuple(entries)))
