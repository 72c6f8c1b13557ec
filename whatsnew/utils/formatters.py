"""
Display formatting functions
"""
from typing import Optional


def format_version_heading(version: Optional[str]) -> str:
    """
    Format the heading shown above a release

    Args:
        version: Version string (e.g., '1.1.0')

    Returns:
        Heading such as 'Version 1.1.0'
    """
    if not version:
        return 'Version N/A'
    return f"Version {version}"


def format_change_count(count: Optional[int]) -> str:
    """Format number of changes in a release ('1 change', '3 changes')"""
    if count is None:
        return 'N/A'
    return f"{count} change" if count == 1 else f"{count} changes"
