"""
Input validation functions
"""
import re
from typing import Any, List, Optional

VERSION_PATTERN = re.compile(r'[0-9]+(\.[0-9]+)*')
MAX_LAST_SEEN_LENGTH = 64


def validate_version(version: str) -> bool:
    """
    Validate version string format

    Args:
        version: Version string to validate (e.g., '1.0.9')

    Returns:
        True if valid, False otherwise
    """
    if not version or not isinstance(version, str):
        return False

    # Dot-separated groups of ASCII digits, no leading 'v'
    return bool(VERSION_PATTERN.fullmatch(version))


def validate_last_seen(last_seen: Any) -> bool:
    """
    Validate a caller-recorded "last seen" value

    None, '' and '0' are all accepted; they mean "no history".
    Anything else only has to be a reasonably short string, malformed
    versions are tolerated by the comparator.
    """
    if last_seen is None:
        return True
    if not isinstance(last_seen, str):
        return False
    return len(last_seen) <= MAX_LAST_SEEN_LENGTH


def _check_text_field(record: dict, field: str, prefix: str, problems: List[str]):
    value = record.get(field)
    if value is None:
        problems.append(f"{prefix}{field} is required")
    elif not isinstance(value, str):
        problems.append(f"{prefix}{field} must be a string")


def validate_release_payload(record: Any) -> List[str]:
    """
    Validate one decoded release record

    Args:
        record: Decoded JSON object, expected shape
            {"version": str, "title": str, "changes": [{"title": str, "description": str}]}

    Returns:
        List of problems, empty if the record is valid
    """
    if not isinstance(record, dict):
        return ['release must be an object']

    problems = []
    _check_text_field(record, 'version', '', problems)
    _check_text_field(record, 'title', '', problems)

    changes = record.get('changes')
    if changes is None:
        problems.append('changes is required')
    elif not isinstance(changes, list):
        problems.append('changes must be a list')
    else:
        for i, change in enumerate(changes):
            if not isinstance(change, dict):
                problems.append(f"changes[{i}] must be an object")
                continue
            _check_text_field(change, 'title', f"changes[{i}].", problems)
            _check_text_field(change, 'description', f"changes[{i}].", problems)

    return problems


def sanitize_input(input_str: str, max_length: Optional[int] = None) -> str:
    """
    Sanitize user input string

    Args:
        input_str: Input string to sanitize
        max_length: Maximum length (optional)

    Returns:
        Sanitized string
    """
    if not input_str:
        return ''

    sanitized = input_str.strip()

    # Remove potentially dangerous characters
    sanitized = re.sub(r'[<>"\']', '', sanitized)

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized
