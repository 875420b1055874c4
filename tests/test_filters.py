#!/usr/bin/env python3
"""
Test suite for releasetags/filters.py — include/exclude patterns
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from releasetags.config import Settings
from releasetags.filters import ReleaseFilter


NAMES = [
    "Movie.2019.1080p.BluRay.x265-GRP.mkv",
    "Movie.2019.1080p.WEB-DL.x264-GRP.mkv",
    "Movie.2023.CAM.x264.mkv",
]


class TestReleaseFilter:
    """Exclude wins over include; no patterns accepts everything"""

    def test_no_patterns(self):
        release_filter = ReleaseFilter()
        assert not release_filter.active
        assert release_filter.apply(NAMES) == NAMES

    def test_exclude(self):
        assert ReleaseFilter(exclude=r'\bcam\b').apply(NAMES) == NAMES[:2]

    def test_include(self):
        assert ReleaseFilter(include='x265').apply(NAMES) == NAMES[:1]

    def test_exclude_beats_include(self):
        release_filter = ReleaseFilter(include='1080p', exclude='bluray')
        assert release_filter.apply(NAMES) == [NAMES[1]]

    def test_case_insensitive(self):
        assert ReleaseFilter(include='WEB-DL').accepts("movie.web-dl.mkv")

    def test_from_settings(self):
        settings = Settings(regex_include_pattern='x264', regex_exclude_pattern='CAM')
        release_filter = ReleaseFilter.from_settings(settings)
        assert release_filter.active
        assert release_filter.apply(NAMES) == [NAMES[1]]
