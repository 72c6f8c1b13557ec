"""Utility functions"""
from .json_utils import clean_for_json
from .validators import validate_version, validate_last_seen, validate_release_payload, sanitize_input
from .formatters import format_version_heading, format_change_count

__all__ = [
    'clean_for_json',
    'validate_version',
    'validate_last_seen',
    'validate_release_payload',
    'sanitize_input',
    'format_version_heading',
    'format_change_count',
]
