"""
Delta selection - which releases a user has not seen yet
"""
from typing import Iterable, List, Optional

from whatsnew.analysis.versions import is_less, version_key
from whatsnew.models import Release
from whatsnew.utils.logger import logger

# Stored by clients that have never recorded a version
NO_HISTORY_SENTINEL = '0'


def sort_ascending(catalog: Iterable[Release]) -> List[Release]:
    """
    Order a catalog from oldest to newest version

    Stable: releases with equal versions keep their input order.
    Returns a new list, the input is left untouched.
    """
    return sorted(catalog, key=lambda release: version_key(release.version))


def sort_descending(catalog: Iterable[Release]) -> List[Release]:
    """Full changelog, newest release first"""
    ordered = sort_ascending(catalog)
    ordered.reverse()
    return ordered


def has_history(last_seen: Optional[str]) -> bool:
    """False for every way of saying "nothing recorded yet": None, '' or '0'"""
    return last_seen not in (None, '', NO_HISTORY_SENTINEL)


def select_new(catalog: Iterable[Release], last_seen: Optional[str]) -> List[Release]:
    """
    Releases newer than the caller's last seen version, newest first

    Args:
        catalog: Releases in any order
        last_seen: Version the user was last shown, None/''/'0' if never

    Returns:
        List of releases, newest first. Each release keeps its own
        change order.

    A last_seen that matches a catalog entry exactly excludes that entry
    and everything before it by position. A last_seen that matches no
    entry falls back to keeping every release strictly newer by value.
    The two can disagree when the catalog was edited between visits.
    """
    ordered = sort_ascending(catalog)
    if not ordered:
        return []

    if not has_history(last_seen):
        logger.debug("No recorded history, returning all %d releases", len(ordered))
        return ordered[::-1]

    latest = ordered[-1].version
    if not is_less(last_seen, latest):
        logger.debug("Last seen %s is not older than latest %s, nothing new", last_seen, latest)
        return []

    index = next((i for i, release in enumerate(ordered) if release.version == last_seen), None)
    if index is not None:
        logger.debug("Last seen %s found at position %d", last_seen, index)
        return ordered[index + 1:][::-1]

    logger.debug("Last seen %s not in catalog, filtering by value", last_seen)
    return [release for release in reversed(ordered) if is_less(last_seen, release.version)]
