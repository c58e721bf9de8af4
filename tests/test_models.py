"""
单元测试：领域模型与默认数据集
"""
import copy

import pytest

from folio.domain.models import (
    AppState,
    Education,
    ExperienceType,
    FontFamily,
    Post,
    Publication,
    ThemeMode,
)
from folio.domain.seed import SEED_DATA, seed_state
from folio.infra.exceptions import ValidationError


class TestSeedState:
    """默认数据集测试类"""

    def test_seed_contents(self):
        """测试默认数据集内容"""
        state = seed_state()
        assert state.profile.name == "Dr. Apurvanand Sahay"
        assert len(state.education) == 5
        assert len(state.experience) == 5
        assert len(state.publications) == 5
        assert [p.id for p in state.posts] == ["1", "2"]
        assert state.settings.theme_mode is ThemeMode.LIGHT
        assert state.settings.font_family is FontFamily.SANS

    def test_seed_round_trips_to_wire_format(self):
        """测试默认数据集序列化后与原始字典一致"""
        assert seed_state().to_dict() == SEED_DATA

    def test_seed_copies_are_independent(self):
        """测试每次返回独立副本"""
        a = seed_state()
        b = seed_state()
        a.profile.skills.append("Rust")
        a.posts.clear()
        assert "Rust" not in b.profile.skills
        assert len(b.posts) == 2
        assert seed_state() == b

    def test_experience_categories(self):
        """测试经历类别枚举"""
        types = [x.type for x in seed_state().experience]
        assert types.count(ExperienceType.ACADEMIC) == 3
        assert types.count(ExperienceType.RESEARCH) == 2


class TestStrictParsing:
    """严格反序列化测试类"""

    @pytest.fixture
    def data(self):
        return copy.deepcopy(SEED_DATA)

    def test_missing_top_level_field(self, data):
        """测试缺少顶层字段"""
        del data["settings"]
        with pytest.raises(ValidationError) as exc:
            AppState.from_dict(data)
        assert exc.value.details["field"] == "state.settings"

    def test_missing_nested_field(self, data):
        """测试缺少嵌套字段"""
        del data["profile"]["email"]
        with pytest.raises(ValidationError):
            AppState.from_dict(data)

    def test_invalid_enum_value(self, data):
        """测试非法枚举值"""
        data["settings"]["themeMode"] = "sepia"
        with pytest.raises(ValidationError):
            AppState.from_dict(data)

    def test_publication_year_must_be_int(self, data):
        """测试出版年份类型"""
        data["publications"][0]["year"] = "2024"
        with pytest.raises(ValidationError):
            AppState.from_dict(data)

    def test_duplicate_ids_rejected(self, data):
        """测试列表内 id 唯一"""
        data["posts"][1]["id"] = "1"
        with pytest.raises(ValidationError):
            AppState.from_dict(data)

    def test_same_id_in_different_lists_allowed(self):
        """测试不同列表之间允许相同 id"""
        state = seed_state()
        assert state.education[0].id == state.posts[0].id == "1"

    def test_not_a_mapping(self):
        """测试顶层不是对象"""
        with pytest.raises(ValidationError):
            AppState.from_dict(["not", "a", "record"])


class TestOptionalFields:
    """可选字段测试类"""

    def test_education_grade_optional(self):
        edu = Education.from_dict({"id": "9", "degree": "PhD", "institution": "X", "year": "2020"})
        assert edu.grade is None
        assert "grade" not in edu.to_dict()

    def test_publication_link_round_trip(self):
        pub = Publication(id="9", title="T", authors="A", venue="V", year=2021, link="https://example.org")
        assert Publication.from_dict(pub.to_dict()) == pub

    def test_post_uses_camel_case_cover_image(self):
        post = Post(id="9", title="T", excerpt="E", content="C", date="2024-01-01", cover_image="img", author="A")
        d = post.to_dict()
        assert d["coverImage"] == "img"
        assert "cover_image" not in d
