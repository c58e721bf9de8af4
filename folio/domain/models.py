"""
Domain models: pure content records for the portfolio, no IO.

JSON keys keep the camelCase wire format of the stored blob
(``coverImage``, ``themeMode``, ...); attribute names are snake_case.
``from_dict`` is strict: a record is either fully populated or rejected with
``ValidationError``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..infra.exceptions import ValidationError


# =============================================================================
# Enums
# =============================================================================


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class FontFamily(str, Enum):
    SANS = "sans"
    SERIF = "serif"


class ExperienceType(str, Enum):
    ACADEMIC = "academic"
    RESEARCH = "research"
    INDUSTRY = "industry"


# =============================================================================
# Field helpers
# =============================================================================


def _require(d: Mapping[str, Any], key: str, entity: str) -> Any:
    if not isinstance(d, Mapping):
        raise ValidationError(f"{entity} must be an object", field=entity, value=d)
    if key not in d or d[key] is None:
        raise ValidationError(f"{entity}.{key} is missing", field=f"{entity}.{key}")
    return d[key]


def _str(d: Mapping[str, Any], key: str, entity: str) -> str:
    v = _require(d, key, entity)
    if not isinstance(v, str):
        raise ValidationError(f"{entity}.{key} must be a string", field=f"{entity}.{key}", value=v)
    return v


def _opt_str(d: Mapping[str, Any], key: str, entity: str) -> Optional[str]:
    v = d.get(key)
    if v is None:
        return None
    if not isinstance(v, str):
        raise ValidationError(f"{entity}.{key} must be a string", field=f"{entity}.{key}", value=v)
    return v


def _str_list(d: Mapping[str, Any], key: str, entity: str) -> List[str]:
    v = _require(d, key, entity)
    if not isinstance(v, list) or not all(isinstance(x, str) for x in v):
        raise ValidationError(f"{entity}.{key} must be a list of strings", field=f"{entity}.{key}", value=v)
    return list(v)


def _int(d: Mapping[str, Any], key: str, entity: str) -> int:
    v = _require(d, key, entity)
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValidationError(f"{entity}.{key} must be an integer", field=f"{entity}.{key}", value=v)
    return v


def _enum(d: Mapping[str, Any], key: str, entity: str, enum_cls):
    v = _require(d, key, entity)
    try:
        return enum_cls(v)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"{entity}.{key} must be one of: {allowed}", field=f"{entity}.{key}", value=v
        ) from None


def _items(d: Mapping[str, Any], key: str, entity: str) -> list:
    v = _require(d, key, entity)
    if not isinstance(v, list):
        raise ValidationError(f"{entity}.{key} must be a list", field=f"{entity}.{key}", value=v)
    return v


# =============================================================================
# Singletons
# =============================================================================


@dataclass(frozen=True)
class Profile:
    name: str
    title: str
    tagline: str
    email: str
    phone: str
    location: str
    about: str
    linkedin: str
    scholar: str
    image: str
    skills: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "tagline": self.tagline,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "about": self.about,
            "linkedin": self.linkedin,
            "scholar": self.scholar,
            "image": self.image,
            "skills": list(self.skills),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Profile":
        e = "profile"
        return cls(
            name=_str(d, "name", e),
            title=_str(d, "title", e),
            tagline=_str(d, "tagline", e),
            email=_str(d, "email", e),
            phone=_str(d, "phone", e),
            location=_str(d, "location", e),
            about=_str(d, "about", e),
            linkedin=_str(d, "linkedin", e),
            scholar=_str(d, "scholar", e),
            image=_str(d, "image", e),
            skills=_str_list(d, "skills", e),
        )


@dataclass(frozen=True)
class SiteSettings:
    theme_mode: ThemeMode
    primary_color: str
    font_family: FontFamily
    seo_title: str
    seo_description: str
    seo_keywords: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "themeMode": self.theme_mode.value,
            "primaryColor": self.primary_color,
            "fontFamily": self.font_family.value,
            "seoTitle": self.seo_title,
            "seoDescription": self.seo_description,
            "seoKeywords": self.seo_keywords,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "SiteSettings":
        e = "settings"
        return cls(
            theme_mode=_enum(d, "themeMode", e, ThemeMode),
            primary_color=_str(d, "primaryColor", e),
            font_family=_enum(d, "fontFamily", e, FontFamily),
            seo_title=_str(d, "seoTitle", e),
            seo_description=_str(d, "seoDescription", e),
            seo_keywords=_str(d, "seoKeywords", e),
        )


# =============================================================================
# List items
# =============================================================================


@dataclass(frozen=True)
class Education:
    id: str
    degree: str
    institution: str
    year: str
    grade: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d = {"id": self.id, "degree": self.degree, "institution": self.institution, "year": self.year}
        if self.grade is not None:
            d["grade"] = self.grade
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Education":
        e = "education"
        return cls(
            id=_str(d, "id", e),
            degree=_str(d, "degree", e),
            institution=_str(d, "institution", e),
            year=_str(d, "year", e),
            grade=_opt_str(d, "grade", e),
        )


@dataclass(frozen=True)
class Experience:
    id: str
    role: str
    organization: str
    duration: str
    type: ExperienceType
    description: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role,
            "organization": self.organization,
            "duration": self.duration,
            "type": self.type.value,
            "description": list(self.description),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Experience":
        e = "experience"
        return cls(
            id=_str(d, "id", e),
            role=_str(d, "role", e),
            organization=_str(d, "organization", e),
            duration=_str(d, "duration", e),
            type=_enum(d, "type", e, ExperienceType),
            description=_str_list(d, "description", e),
        )


@dataclass(frozen=True)
class Publication:
    id: str
    title: str
    authors: str
    venue: str
    year: int
    link: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d = {"id": self.id, "title": self.title, "authors": self.authors, "venue": self.venue, "year": self.year}
        if self.link is not None:
            d["link"] = self.link
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Publication":
        e = "publications"
        return cls(
            id=_str(d, "id", e),
            title=_str(d, "title", e),
            authors=_str(d, "authors", e),
            venue=_str(d, "venue", e),
            year=_int(d, "year", e),
            link=_opt_str(d, "link", e),
        )


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    excerpt: str
    content: str
    date: str
    cover_image: str
    author: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "date": self.date,
            "coverImage": self.cover_image,
            "tags": list(self.tags),
            "author": self.author,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Post":
        e = "posts"
        return cls(
            id=_str(d, "id", e),
            title=_str(d, "title", e),
            excerpt=_str(d, "excerpt", e),
            content=_str(d, "content", e),
            date=_str(d, "date", e),
            cover_image=_str(d, "coverImage", e),
            tags=_str_list(d, "tags", e),
            author=_str(d, "author", e),
        )


def ensure_unique_ids(items: Iterable[Any], list_name: str) -> None:
    """Raise ValidationError if two items in one list share an id."""
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValidationError(f"duplicate id in {list_name}: {item.id}", field=list_name, value=item.id)
        seen.add(item.id)


# =============================================================================
# Root record
# =============================================================================


@dataclass(frozen=True)
class AppState:
    profile: Profile
    settings: SiteSettings
    education: List[Education] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    publications: List[Publication] = field(default_factory=list)
    posts: List[Post] = field(default_factory=list)

    def validate(self) -> "AppState":
        ensure_unique_ids(self.education, "education")
        ensure_unique_ids(self.experience, "experience")
        ensure_unique_ids(self.publications, "publications")
        ensure_unique_ids(self.posts, "posts")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "settings": self.settings.to_dict(),
            "education": [x.to_dict() for x in self.education],
            "experience": [x.to_dict() for x in self.experience],
            "publications": [x.to_dict() for x in self.publications],
            "posts": [x.to_dict() for x in self.posts],
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "AppState":
        e = "state"
        state = cls(
            profile=Profile.from_dict(_require(d, "profile", e)),
            settings=SiteSettings.from_dict(_require(d, "settings", e)),
            education=[Education.from_dict(x) for x in _items(d, "education", e)],
            experience=[Experience.from_dict(x) for x in _items(d, "experience", e)],
            publications=[Publication.from_dict(x) for x in _items(d, "publications", e)],
            posts=[Post.from_dict(x) for x in _items(d, "posts", e)],
        )
        return state.validate()
