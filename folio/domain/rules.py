"""
Domain rules: pure functions over AppState.

- merge_state: typed shallow merge of a partial update over the root record
- list helpers used by dashboard editors (add / replace / remove by id)
- post id generation and draft creation
- chart data for the about page and the dashboard
"""
from __future__ import annotations

from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, TypeVar, TypedDict

from ..infra.exceptions import ValidationError
from .models import (
    AppState,
    Education,
    Experience,
    ExperienceType,
    FontFamily,
    Post,
    Profile,
    Publication,
    SiteSettings,
    ThemeMode,
)

DEFAULT_COVER_IMAGE = "https://picsum.photos/800/400"

# fixed illustrative breakdown on the about page
FOCUS_BREAKDOWN: Tuple[Dict[str, Any], ...] = (
    {"name": "Research", "value": 35},
    {"name": "Teaching", "value": 30},
    {"name": "Development", "value": 20},
    {"name": "Admin", "value": 15},
)


class StatePatch(TypedDict, total=False):
    """Partial update of the root record; every present key replaces the whole field."""
    profile: Profile
    settings: SiteSettings
    education: List[Education]
    experience: List[Experience]
    publications: List[Publication]
    posts: List[Post]


# key -> (scalar type, is list)
_PATCH_FIELDS: Dict[str, Tuple[type, bool]] = {
    "profile": (Profile, False),
    "settings": (SiteSettings, False),
    "education": (Education, True),
    "experience": (Experience, True),
    "publications": (Publication, True),
    "posts": (Post, True),
}


def _check_patch(patch: Mapping[str, Any]) -> None:
    for key, value in patch.items():
        if key not in _PATCH_FIELDS:
            raise ValidationError(f"unknown state field: {key}", field=key)
        expected, is_list = _PATCH_FIELDS[key]
        if is_list:
            if not isinstance(value, (list, tuple)) or not all(isinstance(x, expected) for x in value):
                raise ValidationError(f"{key} must be a list of {expected.__name__}", field=key)
        elif not isinstance(value, expected):
            raise ValidationError(f"{key} must be a {expected.__name__}", field=key)


def merge_state(state: AppState, patch: StatePatch) -> AppState:
    """Return a new AppState with the patched top-level fields replaced.

    Nested objects are never deep-merged: a ``settings`` patch must carry the
    complete SiteSettings.
    """
    _check_patch(patch)
    merged = AppState(
        profile=patch["profile"] if "profile" in patch else state.profile,
        settings=patch["settings"] if "settings" in patch else state.settings,
        education=list(patch["education"]) if "education" in patch else state.education,
        experience=list(patch["experience"]) if "experience" in patch else state.experience,
        publications=list(patch["publications"]) if "publications" in patch else state.publications,
        posts=list(patch["posts"]) if "posts" in patch else state.posts,
    )
    return merged.validate()


# =============================================================================
# List item operations
# =============================================================================

T = TypeVar("T")


def add_item(items: Sequence[T], item: T) -> List[T]:
    """Append ``item``; its id must not already be in the list."""
    if any(x.id == item.id for x in items):
        raise ValidationError(f"id already exists: {item.id}", field="id", value=item.id)
    return [*items, item]


def replace_item(items: Sequence[T], item: T) -> List[T]:
    """Swap the entry with the same id for ``item``, keeping its position."""
    if not any(x.id == item.id for x in items):
        raise ValidationError(f"no item with id: {item.id}", field="id", value=item.id)
    return [item if x.id == item.id else x for x in items]


def remove_item(items: Sequence[T], item_id: str) -> List[T]:
    """Drop the entry with ``item_id``; the order of the rest is unchanged."""
    kept = [x for x in items if x.id != item_id]
    if len(kept) == len(items):
        raise ValidationError(f"no item with id: {item_id}", field="id", value=item_id)
    return kept


# =============================================================================
# Posts
# =============================================================================


def generate_post_id(existing_ids: Iterable[str], now: datetime) -> str:
    """Millisecond timestamp of ``now``, bumped until it is unique."""
    taken = set(existing_ids)
    candidate = int(now.timestamp() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def new_post_draft(state: AppState, now: datetime) -> Post:
    return Post(
        id=generate_post_id((p.id for p in state.posts), now),
        title="",
        excerpt="",
        content="",
        date=now.date().isoformat(),
        cover_image=DEFAULT_COVER_IMAGE,
        tags=[],
        author=state.profile.name,
    )


def parse_tags(text: str) -> List[str]:
    """Comma separated tags, blanks dropped, first occurrence wins."""
    tags: List[str] = []
    for raw in (text or "").split(","):
        tag = raw.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def parse_lines(text: str) -> List[str]:
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def update_settings(settings: SiteSettings, **changes: Any) -> SiteSettings:
    """Complete replacement SiteSettings with ``changes`` applied."""
    try:
        if "theme_mode" in changes:
            changes["theme_mode"] = ThemeMode(changes["theme_mode"])
        if "font_family" in changes:
            changes["font_family"] = FontFamily(changes["font_family"])
        return replace(settings, **changes)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"invalid settings field: {e}", field="settings") from e


# =============================================================================
# Chart data
# =============================================================================


def experience_breakdown(experience: Iterable[Experience]) -> List[Dict[str, Any]]:
    """Count of experience entries per category, in enum order, zero counts omitted."""
    counts = Counter(x.type for x in experience)
    return [
        {"name": t.value.capitalize(), "value": counts[t]}
        for t in ExperienceType
        if counts[t]
    ]
