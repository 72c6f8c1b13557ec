"""Pydantic models for changelog entries."""
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Change(BaseModel):
    """A single note inside a release."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> "Change":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump()


class Release(BaseModel):
    """One version's changelog entry."""

    model_config = ConfigDict(frozen=True)

    version: str  # e.g., "1.0.9", not zero-padded, any number of segments
    title: str
    changes: Tuple[Change, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Release":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Plain dict with `changes` as a list, in display order"""
        return {
            'version': self.version,
            'title': self.title,
            'changes': [change.to_dict() for change in self.changes],
        }
