#!/usr/bin/env python3
"""
Release group extraction

Scene/P2P names end with '-GROUP' before the extension:

    Show.S01E02.1080p.WEB-DL-GROUPX.mkv  ->  GROUPX
    Movie 2019 1080p BluRay x264 - GRP[rarbg].mkv  ->  GRP

This is a single dedicated pattern, tighter than the category tables:
it must not mistake a season/episode marker or a trailing number for a
group name.
"""

import re
from typing import Optional

RELEASE_GROUP_RE = re.compile(
    r'- ?'
    # Not a bare number, season (S01), episode (1x02 / e02 / ep02),
    # or a bracketed tag on its own
    r'(?!\d+$|S\d+|\d+x|ep?\d+|[^\[]+\]$)'
    # Group: at least one non-digit character after the first
    r'([^\-. \[]+[^\-. \[)\]\d][^\-. \[)\]]*)'
    # Optional [hash] / [tag], then extension or end of string
    r'(?:\[[\w.-]+\])?'
    r'(?=\.\w{2,4}$|$)',
    re.IGNORECASE
)


def extract_release_group(filename: str) -> Optional[str]:
    """Return the release group of filename, or None"""
    if not filename:
        return None
    match = RELEASE_GROUP_RE.search(filename)
    return match.group(1) if match else None
