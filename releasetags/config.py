#!/usr/bin/env python3
"""
Settings loader

Precedence, lowest to highest:
1. Built-in defaults
2. YAML config file (same key names as Settings fields)
3. Environment variables (MAX_REGEX_SORT_PATTERNS, DEFAULT_REGEX_SORT_PATTERNS,
   DEFAULT_REGEX_INCLUDE_PATTERN, DEFAULT_REGEX_EXCLUDE_PATTERN, LOG_LEVEL)

Everything is validated here, at startup. A Settings value that exists is
known to be usable: the limit is a non-negative int, include/exclude patterns
compile, and the sort patterns passed override validation.
"""

import os
import re
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

import yaml

from releasetags.constants import (
    DEFAULT_MAX_SORT_PATTERNS, DEFAULT_LOG_LEVEL, LOG_LEVELS, ENV_SETTINGS,
)
from releasetags.exceptions import ConfigError
from releasetags.overrides import (
    OverridePattern, parse_override_string, parse_override_tokens, validate_overrides,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Validated runtime settings"""
    max_regex_sort_patterns: int = DEFAULT_MAX_SORT_PATTERNS
    regex_sort_patterns: Tuple[OverridePattern, ...] = ()
    regex_include_pattern: Optional[str] = None
    regex_exclude_pattern: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(config_path: Union[str, Path, None] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment

    Args:
        config_path: YAML file; must exist when given
        environ: mapping to read variables from (default: os.environ)

    Raises:
        ConfigError: unreadable file or a value that cannot be coerced
        PatternLimitError / PatternCompileError / DuplicateLabelError:
            the sort patterns are invalid
    """
    known = set(ENV_SETTINGS.values())
    raw = {}

    if config_path is not None:
        file_values = load_config(Path(config_path))
        for key, value in file_values.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
            elif value is not None:
                # Blank key ('log_level:') keeps the default
                raw[key] = value

    env = os.environ if environ is None else environ
    for env_name, key in ENV_SETTINGS.items():
        value = env.get(env_name)
        if value is not None and value.strip():
            raw[key] = value

    return build_settings(raw)


def build_settings(raw: Mapping[str, object]) -> Settings:
    """Coerce and validate a flat mapping of settings values"""
    max_patterns = _coerce_int(
        raw.get('max_regex_sort_patterns', DEFAULT_MAX_SORT_PATTERNS), 'max_regex_sort_patterns'
    )
    if max_patterns < 0:
        raise ConfigError(f"max_regex_sort_patterns must be >= 0, got {max_patterns}")

    sort_patterns = _coerce_overrides(raw.get('regex_sort_patterns'))
    validate_overrides(sort_patterns, max_patterns)

    log_level = str(raw.get('log_level', DEFAULT_LOG_LEVEL)).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'")

    return Settings(
        max_regex_sort_patterns=max_patterns,
        regex_sort_patterns=tuple(sort_patterns),
        regex_include_pattern=_coerce_pattern(raw.get('regex_include_pattern'), 'regex_include_pattern'),
        regex_exclude_pattern=_coerce_pattern(raw.get('regex_exclude_pattern'), 'regex_exclude_pattern'),
        log_level=log_level,
    )


def build_classifier(settings: Settings):
    """Classifier over the default tables with the configured sort patterns merged in"""
    from releasetags.classifier import ReleaseClassifier
    from releasetags.tables import build_default_tables

    tables = build_default_tables()
    if settings.regex_sort_patterns:
        tables = tables.with_overrides(settings.regex_sort_patterns, settings.max_regex_sort_patterns)
    return ReleaseClassifier(tables)


def _coerce_int(value, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from e


def _coerce_overrides(value):
    if value is None:
        return []
    if isinstance(value, str):
        return parse_override_string(value)
    if isinstance(value, list):
        if not all(isinstance(item, str) for item in value):
            raise ConfigError("regex_sort_patterns list entries must be 'label<::>pattern' strings")
        return parse_override_tokens(value)
    raise ConfigError(f"regex_sort_patterns must be a string or a list, got {type(value).__name__}")


def _coerce_pattern(value, key: str) -> Optional[str]:
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    try:
        re.compile(value)
    except re.error as e:
        raise ConfigError(f"Invalid regex pattern for {key}: {value} ({e})") from e
    return value
