"""Saved filter store.

Named snapshots of a FilterState kept in memory. Names need not be
unique; a saved filter is identified by its generated id. Built-in
presets come from presets.yaml and cannot be deleted.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import get_built_in_presets, get_logger
from .filter_state import FilterState

logger = get_logger("saved_filters")


@dataclass(frozen=True)
class SavedFilter:
    """A saved filter configuration."""

    id: str
    name: str
    state: FilterState
    built_in: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "state": self.state.to_dict(),
            "built_in": self.built_in,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavedFilter":
        """Create from dictionary."""
        created_at = data.get("created_at")
        return cls(
            id=data["id"],
            name=data["name"],
            state=FilterState.from_dict(data.get("state", {})),
            built_in=bool(data.get("built_in", False)),
            created_at=datetime.fromisoformat(created_at) if created_at else datetime.now(),
        )


def load_built_in_filters() -> List[SavedFilter]:
    """Build SavedFilter objects for the presets configured in presets.yaml."""
    saved = []
    for key, preset in get_built_in_presets().get_all_presets().items():
        saved.append(
            SavedFilter(
                id=key,
                name=preset.get("name", key),
                state=FilterState.from_dict(preset.get("filters", {})),
                built_in=True,
            )
        )
    return saved


class SavedFilterStore:
    """In-memory list of saved filters, in creation order."""

    def __init__(self, include_built_in: bool = True):
        self._filters: List[SavedFilter] = load_built_in_filters() if include_built_in else []

    def __len__(self) -> int:
        return len(self._filters)

    def list(self, include_built_in: bool = True) -> List[SavedFilter]:
        """Get all saved filters."""
        if include_built_in:
            return list(self._filters)
        return [saved for saved in self._filters if not saved.built_in]

    def get(self, filter_id: str) -> Optional[SavedFilter]:
        """Get a saved filter by id, or None."""
        return next((saved for saved in self._filters if saved.id == filter_id), None)

    def save(self, name: str, state: FilterState) -> SavedFilter:
        """
        Save a filter state under a name.

        Args:
            name: Display name; duplicates are allowed.
            state: Snapshot to store, including the search term.

        Returns:
            The new SavedFilter.
        """
        saved = SavedFilter(id=str(uuid.uuid4()), name=name, state=state)
        self._filters.append(saved)
        logger.info(f"Saved filter '{name}' ({saved.id})")
        return saved

    def delete(self, filter_id: str) -> bool:
        """
        Delete a saved filter.

        Returns:
            True if deleted, False if missing or built-in.
        """
        saved = self.get(filter_id)
        if saved is None or saved.built_in:
            return False
        self._filters.remove(saved)
        logger.info(f"Deleted saved filter '{saved.name}' ({filter_id})")
        return True

    @staticmethod
    def apply(saved: SavedFilter) -> FilterState:
        """Return the stored snapshot verbatim."""
        return saved.state
