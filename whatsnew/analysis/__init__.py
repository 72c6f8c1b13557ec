"""Version ordering and unseen-release selection"""
from .versions import is_less, parse_version, version_key, versions_equal
from .delta import NO_HISTORY_SENTINEL, has_history, select_new, sort_ascending, sort_descending

__all__ = [
    'is_less',
    'parse_version',
    'version_key',
    'versions_equal',
    'NO_HISTORY_SENTINEL',
    'has_history',
    'select_new',
    'sort_ascending',
    'sort_descending',
]
