#!/usr/bin/env python3
"""
classify.py - Release tag manifest

NEVER moves or opens files. Only reads filenames and writes CSV.

For every filename:
1. Include/exclude filter (skipped with --no-filter)
2. Resolution, quality -> single best tag
3. Visual, audio, encode, language/tier tags -> all tags, specific beats generic
4. Release group -> trailing '-GROUP'
"""

import os
import sys
import csv
import logging
import argparse
from pathlib import Path
from typing import Iterable, List, Optional
from collections import defaultdict

from releasetags.classifier import ClassificationResult
from releasetags.config import Settings, load_settings, build_classifier
from releasetags.constants import CATEGORY_ORDER, VIDEO_EXTENSIONS, RESOLUTION, QUALITY
from releasetags.exceptions import ReleaseTagsError
from releasetags.filters import ReleaseFilter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MANIFEST_FIELDS = ['filename'] + CATEGORY_ORDER + ['release_group']
MULTI_VALUE_SEPARATOR = '|'


def collect_filenames(paths: Iterable[Path]) -> List[str]:
    """
    Expand CLI paths into filenames

    Directories are scanned recursively for video files. Anything else is
    taken as a filename, whether or not it exists on disk.
    """
    filenames = []
    for path in paths:
        if path.is_dir():
            found = sorted(
                p.name for p in path.rglob('*')
                if p.is_file()
                and p.suffix.lower() in VIDEO_EXTENSIONS
                and not p.name.startswith('._')
            )
            logger.info(f"Found {len(found)} video files in {path}")
            filenames.extend(found)
        else:
            filenames.append(path.name)
    return filenames


def manifest_row(result: ClassificationResult) -> dict:
    row = {}
    for key, value in result.to_dict().items():
        if isinstance(value, list):
            row[key] = MULTI_VALUE_SEPARATOR.join(value)
        else:
            row[key] = value or ''
    return row


class ReleaseManifest:
    """Classify a batch of filenames and report on it"""

    def __init__(self, settings: Settings, use_filter: bool = True):
        self.settings = settings
        self.classifier = build_classifier(settings)
        self.release_filter = ReleaseFilter.from_settings(settings) if use_filter else ReleaseFilter()
        self.stats = defaultdict(int)

    def process(self, filenames: List[str]) -> List[ClassificationResult]:
        accepted = self.release_filter.apply(filenames)
        self.stats['filtered'] += len(filenames) - len(accepted)
        if self.release_filter.active:
            logger.info(f"Filter kept {len(accepted)}/{len(filenames)} filenames")

        results = []
        for i, filename in enumerate(accepted, 1):
            if i % 500 == 0:
                logger.info(f"Processing {i}/{len(accepted)}...")
            result = self.classifier.classify(filename)
            if not result.tags:
                self.stats['untagged'] += 1
            if result.release_group is None:
                self.stats['no_release_group'] += 1
            results.append(result)
        return results

    def write_manifest(self, results: List[ClassificationResult], output_path: Path):
        """Write classification results to properly-quoted CSV manifest"""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=MANIFEST_FIELDS, quoting=csv.QUOTE_ALL)
            writer.writeheader()
            for result in results:
                writer.writerow(manifest_row(result))

        logger.info(f"Wrote manifest to {output_path}")

    def print_stats(self, results: List[ClassificationResult]):
        """Print per-category tag statistics"""
        total = len(results)

        print("\n" + "=" * 60)
        print("RELEASE TAG STATISTICS")
        print("=" * 60)
        print(f"Total filenames classified: {total}")
        if self.stats.get('filtered'):
            print(f"  Rejected by include/exclude filter: {self.stats['filtered']}")
        print()

        for name in CATEGORY_ORDER:
            counts = defaultdict(int)
            for r in results:
                value = getattr(r, name)
                labels = (value,) if name in (RESOLUTION, QUALITY) else value
                for label in labels:
                    if label:
                        counts[label] += 1
            if not counts:
                continue
            print(f"BY {name.replace('_', ' ').upper()}:")
            for label, count in sorted(counts.items(), key=lambda x: -x[1]):
                pct = (count / total * 100) if total > 0 else 0
                print(f"  {label:15s}: {count:4d} ({pct:5.1f}%)")
            print()

        groups = sum(1 for r in results if r.release_group)
        print(f"Release group found: {groups}/{total}")
        if self.stats.get('untagged'):
            print(f"No tags at all:      {self.stats['untagged']}")
        print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Classify release filenames into tags and write a CSV manifest',
        epilog="""
NEVER moves files. Only reads filenames and writes CSV.

Examples:
  python classify.py /path/to/downloads
  python classify.py "Show.S01E02.1080p.WEB-DL.DDP5.1.H.264-GROUPX.mkv"
  python classify.py /path/to/downloads --config config_external.yaml
  python classify.py /path/to/downloads --output output/my_manifest.csv
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('paths', type=Path, nargs='+',
                        help='Directories to scan, or release filenames')
    parser.add_argument('--output', '-o', type=Path,
                        default=Path('output/release_manifest.csv'),
                        help='Output CSV manifest path (default: output/release_manifest.csv)')
    parser.add_argument('--config', type=Path, default=None,
                        help='YAML configuration file (environment variables take precedence)')
    parser.add_argument('--no-filter', action='store_true',
                        help='Ignore the configured include/exclude patterns')

    args = parser.parse_args(argv)

    if args.config is not None and not args.config.exists():
        logger.error(f"Config file not found: {args.config}")
        return 1

    try:
        settings = load_settings(args.config, os.environ)
        manifest = ReleaseManifest(settings, use_filter=not args.no_filter)
    except ReleaseTagsError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logging.getLogger().setLevel(settings.log_level)

    filenames = collect_filenames(args.paths)
    results = manifest.process(filenames)
    manifest.write_manifest(results, args.output)
    manifest.print_stats(results)

    return 0


if __name__ == '__main__':
    sys.exit(main())
