"""Unit tests for extraction rule defaults and overrides."""

import pytest

from tonal_scheme.errors import ConfigError
from tonal_scheme.scheme.rules import (
    DARK_ROLE_RULES,
    LIGHT_ROLE_RULES,
    SURFACE_ROLE_NAMES,
    SurfaceRules,
    merge_rules,
    role_names,
)


class TestDefaultRules:
    """Test the built-in light and dark tables."""

    @pytest.mark.unit
    def test_dark_source_steps(self):
        assert DARK_ROLE_RULES.source == 80
        assert DARK_ROLE_RULES.on_source == 20
        assert DARK_ROLE_RULES.base.background == 6

    @pytest.mark.unit
    def test_light_source_steps(self):
        assert LIGHT_ROLE_RULES.source == 40
        assert LIGHT_ROLE_RULES.on_source == 100
        assert LIGHT_ROLE_RULES.base.surface_container_lowest == 100

    @pytest.mark.unit
    def test_surface_roles_cover_all_fields(self):
        assert len(SurfaceRules._fields) == 19
        assert set(SURFACE_ROLE_NAMES) == set(SurfaceRules._fields)


class TestMergeRules:
    """Test sparse overrides on top of a rule set."""

    @pytest.mark.unit
    def test_no_overrides_returns_base(self):
        assert merge_rules(DARK_ROLE_RULES) is DARK_ROLE_RULES
        assert merge_rules(DARK_ROLE_RULES, {}) is DARK_ROLE_RULES

    @pytest.mark.unit
    def test_snake_and_camel_keys(self):
        merged = merge_rules(DARK_ROLE_RULES, {"source": 70, "onSource": 10})
        assert merged.source == 70
        assert merged.on_source == 10
        assert merged.container == DARK_ROLE_RULES.container

    @pytest.mark.unit
    def test_nested_surface_merge(self):
        merged = merge_rules(LIGHT_ROLE_RULES, {"base": {"surfaceDim": 80, "outline": 45}})
        assert merged.base.surface_dim == 80
        assert merged.base.outline == 45
        assert merged.base.background == LIGHT_ROLE_RULES.base.background
        assert merged.source == LIGHT_ROLE_RULES.source

    @pytest.mark.unit
    def test_none_keeps_default(self):
        merged = merge_rules(DARK_ROLE_RULES, {"source": None, "on_source": 25})
        assert merged.source == 80
        assert merged.on_source == 25

    @pytest.mark.unit
    def test_defaults_are_not_mutated(self):
        merge_rules(DARK_ROLE_RULES, {"source": 50, "base": {"scrim": 5}})
        assert DARK_ROLE_RULES.source == 80
        assert DARK_ROLE_RULES.base.scrim == 0

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "overrides",
        [
            {"primary": 40},
            {"source": 101},
            {"source": -1},
            {"source": 40.5},
            {"base": {"banner": 10}},
            {"base": {"scrim": 200}},
            {"base": 10},
            ["source", 40],
        ],
    )
    def test_invalid_overrides_raise(self, overrides):
        with pytest.raises(ConfigError):
            merge_rules(DARK_ROLE_RULES, overrides)

    @pytest.mark.unit
    def test_error_names_the_key(self):
        with pytest.raises(ConfigError) as exc_info:
            merge_rules(DARK_ROLE_RULES, {"onSource": 500})
        assert exc_info.value.key == "onSource"
        assert exc_info.value.value == 500


class TestRoleNames:
    """Test role name expansion for a color key."""

    @pytest.mark.unit
    def test_ten_roles(self):
        names = role_names("brand")
        assert len(names) == 10
        assert names[:2] == ["brand", "brandHover"]
        assert "onBrandContainer" in names
