"""
领域层：内容模型、默认数据集与纯函数规则（不做 IO）。
"""

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
from .rules import StatePatch, merge_state
from .seed import SEED_DATA, seed_state

__all__ = [
    "AppState",
    "Education",
    "Experience",
    "ExperienceType",
    "FontFamily",
    "Post",
    "Profile",
    "Publication",
    "SiteSettings",
    "ThemeMode",
    "StatePatch",
    "merge_state",
    "SEED_DATA",
    "seed_state",
]
