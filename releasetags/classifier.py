#!/usr/bin/env python3
"""
Release filename classifier

Applies the category tables to one filename:
1. Single-valued categories (resolution, quality) -> first match in table order
2. Multi-valued categories (visual, audio, encodes, languages) -> every match,
   then labels hidden by a more specific match are dropped
   (HDR10+ hides HDR10 and HDR, DTS-HD MA hides DTS-HD and DTS, DD+ hides DD)
3. Release group -> dedicated trailing '-GROUP' pattern

Classification never raises: any string, including '', yields a result.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Tuple

from releasetags.constants import CATEGORY_ORDER
from releasetags.release_group import extract_release_group
from releasetags.tables import Cardinality, Category, CategoryTables, build_default_tables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """Tags recognised in one filename"""
    filename: str
    resolution: Optional[str] = None
    quality: Optional[str] = None
    visual_tags: Tuple[str, ...] = ()
    audio_tags: Tuple[str, ...] = ()
    encodes: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()  # language names, audio markers and tier labels
    release_group: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        """Plain dict with lists instead of tuples (JSON friendly)"""
        return {key: list(value) if isinstance(value, tuple) else value
                for key, value in asdict(self).items()}

    @property
    def tags(self) -> Tuple[str, ...]:
        """Every label found, in category order"""
        found = []
        for name in CATEGORY_ORDER:
            value = getattr(self, name)
            if isinstance(value, tuple):
                found.extend(value)
            elif value:
                found.append(value)
        return tuple(found)


def match_category(category: Category, text: str) -> Tuple[str, ...]:
    """
    Labels of category that match text, in table order

    SINGLE_BEST returns at most one label. COLLECT_ALL returns every match
    that is not suppressed by another match.
    """
    if category.cardinality is Cardinality.SINGLE_BEST:
        for label, pattern in category.entries:
            if pattern.matches(text):
                return (label,)
        return ()

    matched = [label for label, pattern in category.entries if pattern.matches(text)]
    hidden = set()
    for label in matched:
        hidden.update(category.suppressions.get(label, ()))
    return tuple(label for label in matched if label not in hidden)


class ReleaseClassifier:
    """Stateless classifier over an explicit, immutable set of tables"""

    def __init__(self, tables: Optional[CategoryTables] = None):
        self.tables = tables if tables is not None else build_default_tables()

    def classify(self, filename: str) -> ClassificationResult:
        text = filename or ''
        fields = {}
        for category in self.tables:
            labels = match_category(category, text)
            if category.cardinality is Cardinality.SINGLE_BEST:
                fields[category.name] = labels[0] if labels else None
            else:
                fields[category.name] = labels

        return ClassificationResult(
            filename=text,
            release_group=extract_release_group(text),
            **fields,
        )

    def classify_many(self, filenames: Iterable[str]) -> List[ClassificationResult]:
        results = [self.classify(name) for name in filenames]
        logger.debug(f"Classified {len(results)} filenames")
        return results
