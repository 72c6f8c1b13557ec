"""
Changelog service - decode request catalogs and build display payloads
"""
from typing import Dict, List, Optional, Sequence, Tuple

from whatsnew.analysis.delta import select_new, sort_descending
from whatsnew.analysis.versions import is_less, versions_equal
from whatsnew.config import APP_VERSION, FALLBACK_RELEASE, MAX_CATALOG_SIZE
from whatsnew.models import Change, Release
from whatsnew.utils.error_handler import PayloadTooLargeError, ValidationError
from whatsnew.utils.formatters import format_change_count, format_version_heading
from whatsnew.utils.logger import logger
from whatsnew.utils.validators import validate_release_payload


def parse_catalog(records) -> Tuple[Release, ...]:
    """
    Validate and decode catalog records from a request body

    Args:
        records: Decoded JSON list of release objects

    Returns:
        Tuple of Release, in input order

    Raises:
        ValidationError: if records is not a list or any record is malformed
        PayloadTooLargeError: if there are more than MAX_CATALOG_SIZE records
    """
    if not isinstance(records, list):
        raise ValidationError('catalog must be a list of releases')

    if len(records) > MAX_CATALOG_SIZE:
        raise PayloadTooLargeError(
            f"catalog has {len(records)} releases", limit=MAX_CATALOG_SIZE
        )

    invalid = {}
    for i, record in enumerate(records):
        problems = validate_release_payload(record)
        if problems:
            invalid[str(i)] = problems

    if invalid:
        logger.warning(f"Rejected catalog with {len(invalid)} malformed release(s)")
        raise ValidationError('catalog contains malformed releases', {'releases': invalid})

    return tuple(Release.from_dict(record) for record in records)


def serialize_release(release: Release) -> Dict:
    """Release dict plus display-ready heading and change count"""
    data = release.to_dict()
    data['heading'] = format_version_heading(release.version)
    data['change_count'] = format_change_count(len(release.changes))
    return data


def build_fallback_release(current_version: Optional[str] = None) -> Release:
    """Generic entry shown when there is nothing new for the user"""
    return Release(
        version=current_version or APP_VERSION,
        title=FALLBACK_RELEASE['title'],
        changes=(
            Change(
                title=FALLBACK_RELEASE['change_title'],
                description=FALLBACK_RELEASE['change_description'],
            ),
        ),
    )


def build_whats_new(
    catalog: Sequence[Release],
    last_seen: Optional[str],
    fallback: bool = True,
    current_version: Optional[str] = None,
) -> Dict:
    """
    Unseen releases for a user, newest first

    Args:
        catalog: Releases in any order
        last_seen: Version the user was last shown (None, '' or '0' if never)
        fallback: Substitute a generic entry when nothing is new
        current_version: Version for the generic entry, defaults to APP_VERSION

    Returns:
        Dict with entries, count and is_fallback
    """
    entries = select_new(catalog, last_seen)
    is_fallback = False

    if not entries and fallback:
        entries = [build_fallback_release(current_version)]
        is_fallback = True

    logger.info(f"What's new for last_seen={last_seen!r}: {len(entries)} release(s), fallback={is_fallback}")

    return {
        'entries': [serialize_release(release) for release in entries],
        'count': 0 if is_fallback else len(entries),
        'is_fallback': is_fallback,
    }


def build_changelog(catalog: Sequence[Release]) -> Dict:
    """Every release, newest first"""
    entries: List[Release] = sort_descending(catalog)
    return {
        'entries': [serialize_release(release) for release in entries],
        'count': len(entries),
    }


def compare_versions(lhs: str, rhs: str) -> Dict:
    """Ordering of two version strings as a dict"""
    return {
        'lhs': lhs,
        'rhs': rhs,
        'is_less': is_less(lhs, rhs),
        'is_greater': is_less(rhs, lhs),
        'equal': versions_equal(lhs, rhs),
    }
