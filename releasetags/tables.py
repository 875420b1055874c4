#!/usr/bin/env python3
"""
Category tables: ordered label -> pattern mappings, one per classification axis

Tables are plain immutable values. build_default_tables() compiles a fresh
set every time it is called; callers own the instance they build and pass it
to ReleaseClassifier. Nothing here is a module-level singleton.
"""

import re
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from releasetags.constants import (
    RESOLUTION_FRAGMENTS, QUALITY_FRAGMENTS,
    VISUAL_TAG_FRAGMENTS, VISUAL_TAG_SUPPRESSIONS,
    AUDIO_TAG_FRAGMENTS, AUDIO_TAG_SUPPRESSIONS,
    ENCODE_FRAGMENTS,
    REMUX_SOURCE, BLURAY_SOURCE, WEB_SOURCE,
    REMUX_TIERS, BLURAY_TIERS, WEB_TIERS, STANDALONE_TIER_GROUPS, BAD_GROUPS,
    AUDIO_MARKER_FRAGMENTS, LANGUAGE_NAME_FRAGMENTS,
    RESOLUTION, QUALITY, VISUAL_TAGS, AUDIO_TAGS, ENCODES, LANGUAGES,
    DEFAULT_MAX_SORT_PATTERNS,
)
from releasetags.exceptions import PatternCompileError
from releasetags.patterns import FragmentPattern, PatternKind, compile_fragment

logger = logging.getLogger(__name__)


class Cardinality(Enum):
    """How many labels a category may report for one filename"""
    SINGLE_BEST = 'single_best'   # first match in table order wins
    COLLECT_ALL = 'collect_all'   # every match, minus suppressed labels


@dataclass(frozen=True)
class Category:
    """One classification axis: ordered entries plus suppression rules"""
    name: str
    cardinality: Cardinality
    entries: Tuple[Tuple[str, FragmentPattern], ...]
    suppressions: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        labels = [label for label, _ in self.entries]
        seen = set()
        for label in labels:
            if label in seen:
                raise ValueError(f"Duplicate label '{label}' in category '{self.name}'")
            seen.add(label)

        for label, hidden in self.suppressions.items():
            unknown = [h for h in (label, *hidden) if h not in seen]
            if unknown:
                raise ValueError(
                    f"Suppression rule in '{self.name}' references unknown labels: {unknown}"
                )

        # Freeze containers handed in by callers
        object.__setattr__(self, 'entries', tuple(self.entries))
        object.__setattr__(self, 'suppressions', MappingProxyType(
            {label: tuple(hidden) for label, hidden in self.suppressions.items()}
        ))

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(label for label, _ in self.entries)

    def pattern_for(self, label: str) -> Optional[FragmentPattern]:
        for entry_label, pattern in self.entries:
            if entry_label == label:
                return pattern
        return None

    def __len__(self) -> int:
        return len(self.entries)


def build_category(name: str, cardinality: Cardinality,
                   fragments: Sequence[Tuple[str, str]],
                   kind: PatternKind = PatternKind.GENERIC,
                   suppressions: Optional[Mapping[str, Sequence[str]]] = None) -> Category:
    """
    Compile (label, fragment) pairs into a Category

    Raises:
        PatternCompileError: a fragment does not compile (label attached)
    """
    entries = []
    for label, fragment in fragments:
        try:
            entries.append((label, compile_fragment(fragment, kind)))
        except PatternCompileError as e:
            raise PatternCompileError(fragment, e.reason, label=label) from e

    return Category(
        name=name,
        cardinality=cardinality,
        entries=tuple(entries),
        suppressions={k: tuple(v) for k, v in (suppressions or {}).items()},
    )


def tier_fragment(source: str, groups: Iterable[str], standalone: Iterable[str] = ()) -> str:
    """
    Fragment for a release-group tier

    Matches the source term followed later by one of the groups as its own
    token. Standalone groups match as a token anywhere.
    """
    alternation = '|'.join(re.escape(g) for g in groups)
    fragment = rf'{source}.*[ .\-_\[(](?:{alternation})'
    standalone = list(standalone)
    if standalone:
        fragment += '|' + '|'.join(re.escape(g) for g in standalone)
    return fragment


def language_fragments() -> List[Tuple[str, str]]:
    """
    Ordered (label, fragment) pairs for the language/tier category

    Order is evaluation priority: remux tiers, Blu-ray tiers, WEB tiers,
    audio markers, language names, then the BAD denylist.
    """
    fragments = []
    for source, tiers in ((REMUX_SOURCE, REMUX_TIERS),
                          (BLURAY_SOURCE, BLURAY_TIERS),
                          (WEB_SOURCE, WEB_TIERS)):
        for label, groups in tiers.items():
            fragments.append(
                (label, tier_fragment(source, groups, STANDALONE_TIER_GROUPS.get(label, ())))
            )

    fragments.extend(AUDIO_MARKER_FRAGMENTS)
    fragments.extend(LANGUAGE_NAME_FRAGMENTS)
    fragments.append(('BAD', '|'.join(re.escape(g) for g in BAD_GROUPS)))
    return fragments


@dataclass(frozen=True)
class CategoryTables:
    """Immutable set of categories in evaluation order"""
    categories: Tuple[Category, ...]

    def __post_init__(self):
        object.__setattr__(self, 'categories', tuple(self.categories))
        names = [c.name for c in self.categories]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate category names: {names}")

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)

    def __getitem__(self, name: str) -> Category:
        for category in self.categories:
            if category.name == name:
                return category
        raise KeyError(name)

    def __contains__(self, name: str) -> bool:
        return any(c.name == name for c in self.categories)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.categories)

    def replace_category(self, category: Category) -> 'CategoryTables':
        """Return new tables with the same-named category swapped in"""
        if category.name not in self:
            raise KeyError(category.name)
        return replace(self, categories=tuple(
            category if c.name == category.name else c for c in self.categories
        ))

    def with_overrides(self, overrides, max_patterns: int = DEFAULT_MAX_SORT_PATTERNS) -> 'CategoryTables':
        """
        Return new tables with custom language/tier patterns merged in

        Fail-closed: on any invalid override this raises and self is untouched.
        """
        from releasetags.overrides import merge_overrides
        return merge_overrides(self, overrides, max_patterns)


def build_default_tables() -> CategoryTables:
    """Compile the built-in tables"""
    tables = CategoryTables(
        categories=(
            build_category(RESOLUTION, Cardinality.SINGLE_BEST, RESOLUTION_FRAGMENTS),
            build_category(QUALITY, Cardinality.SINGLE_BEST, QUALITY_FRAGMENTS),
            build_category(VISUAL_TAGS, Cardinality.COLLECT_ALL, VISUAL_TAG_FRAGMENTS,
                           suppressions=VISUAL_TAG_SUPPRESSIONS),
            build_category(AUDIO_TAGS, Cardinality.COLLECT_ALL, AUDIO_TAG_FRAGMENTS,
                           suppressions=AUDIO_TAG_SUPPRESSIONS),
            build_category(ENCODES, Cardinality.COLLECT_ALL, ENCODE_FRAGMENTS),
            build_category(LANGUAGES, Cardinality.COLLECT_ALL, language_fragments(),
                           kind=PatternKind.LANGUAGE),
        ),
    )
    logger.debug(
        f"Compiled {sum(len(c) for c in tables)} built-in patterns "
        f"across {len(tables.categories)} categories"
    )
    return tables
