"""Nutrition goal profile persistence."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from calorie_coach.domain.profiles import (
    DEFAULT_FITNESS_GOAL,
    FITNESS_GOALS,
    GOAL_PRESETS,
    GoalPreset,
    UserProfile,
)

_PROFILE_FIELDS = (
    "display_name",
    "email",
    "fitness_goal",
    "calories_goal",
    "macros",
    "setup_completed",
)
_MACRO_FIELDS = ("protein", "carbs", "fat")

_logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Keyed JSON document storage for one collection."""

    def get(self, key: str) -> dict[str, object] | None:
        """Return the document stored under key, if present."""

    def set(self, key: str, document: dict[str, object]) -> None:
        """Write the full document under key."""

    def update(self, key: str, partial: dict[str, object]) -> None:
        """Merge top-level fields into an existing document."""

    def exists(self, key: str) -> bool:
        """Return True when a document is stored under key."""


@dataclass
class ProfileService:
    """Read and write user profiles in the document store."""

    store: DocumentStore

    def create(self, user_id: str, partial: Mapping[str, object]) -> UserProfile:
        """Merge fields over the stored or default profile and upsert it."""
        existing = self.store.get(user_id)
        base = (
            _profile_from_document(user_id, existing)
            if existing is not None
            else UserProfile(id=user_id)
        )
        document = base.model_dump(exclude={"id"})
        document.update(_sanitize_partial(partial))
        profile = _profile_from_document(user_id, document)
        stored = profile.model_dump(exclude={"id"})
        if existing is None:
            self.store.set(user_id, stored)
        else:
            self.store.update(user_id, stored)
        _logger.info("Profile stored for user %s", user_id)
        return profile

    def get(self, user_id: str) -> UserProfile | None:
        """Return the user's profile or None when it does not exist."""
        document = self.store.get(user_id)
        if document is None:
            return None
        return _profile_from_document(user_id, document)

    def update(self, user_id: str, partial: Mapping[str, object]) -> bool:
        """Write recognized fields, creating the profile when absent."""
        cleaned = _sanitize_partial(partial)
        if not self.store.exists(user_id):
            document = UserProfile(id=user_id).model_dump(exclude={"id"})
            document.update(cleaned)
            self.store.set(
                user_id,
                _profile_from_document(user_id, document).model_dump(exclude={"id"}),
            )
            return True
        if cleaned:
            self.store.update(user_id, cleaned)
        return True


def goal_preset(goal: str) -> GoalPreset:
    """Return the suggested targets for a fitness goal."""
    return GOAL_PRESETS.get(goal, GOAL_PRESETS[DEFAULT_FITNESS_GOAL])


def _sanitize_partial(partial: Mapping[str, object]) -> dict[str, object]:
    """Keep recognized profile fields and coerce their values."""
    cleaned: dict[str, object] = {}
    for field in _PROFILE_FIELDS:
        if field not in partial:
            continue
        value = partial[field]
        if field in {"display_name", "email"}:
            cleaned[field] = value if isinstance(value, str) else None
        elif field == "fitness_goal":
            if value in FITNESS_GOALS:
                cleaned[field] = value
        elif field == "calories_goal":
            calories = _coerce_int(value)
            if calories > 0:
                cleaned[field] = calories
        elif field == "macros":
            cleaned[field] = _complete_macros(value)
        elif field == "setup_completed":
            cleaned[field] = bool(value)
    return cleaned


def _complete_macros(value: object) -> dict[str, int]:
    """Return a full protein/carbs/fat triple, defaulting missing parts to 0."""
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    source = value if isinstance(value, Mapping) else {}
    return {field: max(_coerce_int(source.get(field)), 0) for field in _MACRO_FIELDS}


def _profile_from_document(user_id: str, document: Mapping[str, object]) -> UserProfile:
    """Build a fully-populated profile from a possibly partial document."""
    fields = UserProfile(id=user_id).model_dump()
    fields.update(_sanitize_partial(document))
    return UserProfile.model_validate(fields)


def _coerce_int(value: object) -> int:
    if isinstance(value, bool) or value is None:
        return 0
    try:
        return int(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0
