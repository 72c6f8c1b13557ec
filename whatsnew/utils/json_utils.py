"""
JSON serialization utilities
"""
from typing import Any

from pydantic import BaseModel


def clean_for_json(data: Any) -> Any:
    """
    Convert models and containers into JSON-serializable structures

    Args:
        data: Data to clean (pydantic model, dict, list, tuple, scalar)

    Returns:
        JSON-serializable data structure
    """
    if isinstance(data, BaseModel):
        return clean_for_json(data.model_dump())

    if isinstance(data, (list, tuple, set, frozenset)):
        return [clean_for_json(item) for item in data]

    if isinstance(data, dict):
        return {str(key): clean_for_json(value) for key, value in data.items()}

    if data is None or isinstance(data, (bool, int, float, str)):
        return data

    # Last resort for anything else
    return str(data)
