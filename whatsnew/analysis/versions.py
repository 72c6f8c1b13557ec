"""
Version comparison - numeric, segment-wise ordering of dotted version strings
"""
from typing import Tuple


def _parse_segment(segment: str) -> str:
    # Only plain ASCII digits count, anything else is treated as absent
    if segment.isascii() and segment.isdigit():
        return segment.lstrip('0') or '0'
    return '0'


def _segment_key(segment: str) -> Tuple[int, str]:
    # Canonical digit strings order numerically by (length, text), with no
    # int() conversion and therefore no limit on segment length
    return (0, '') if segment == '0' else (len(segment), segment)


def parse_version(version: str) -> Tuple[str, ...]:
    """
    Parse a dotted version string into canonical integer segments

    Each segment is returned as a decimal string without leading zeros.
    Malformed segments degrade to '0' instead of failing, so the result is
    never empty: '' -> ('0',), '1.x.03' -> ('1', '0', '3').

    Args:
        version: Version string (e.g., '1.2.10')

    Returns:
        Tuple of non-negative decimal strings, one per dot-separated segment
    """
    if not isinstance(version, str):
        return ('0',)
    return tuple(_parse_segment(segment) for segment in version.split('.'))


def version_key(version: str) -> Tuple[Tuple[int, str], ...]:
    """
    Sort key consistent with is_less

    Trailing zero segments are dropped so that equal versions produce
    equal keys ('1.2' and '1.2.0' give the same key).
    """
    parts = [_segment_key(segment) for segment in parse_version(version)]
    while parts and parts[-1] == (0, ''):
        parts.pop()
    return tuple(parts)


def is_less(lhs: str, rhs: str) -> bool:
    """
    True iff lhs is a strictly older version than rhs

    Segments are compared numerically from left to right; the shorter
    version is padded with zeros, so '1.2' and '1.2.0' are equal and
    '1.2.9' is older than '1.2.10'. Total over all string inputs.
    """
    # With trailing zeros stripped, a key that is a prefix of the other is
    # followed by a non-zero segment there, so tuple order matches padding
    return version_key(lhs) < version_key(rhs)


def versions_equal(lhs: str, rhs: str) -> bool:
    """Version-equality, i.e. neither is older than the other"""
    return version_key(lhs) == version_key(rhs)
