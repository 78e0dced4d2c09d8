"""Tests for SkillRegistry."""

import dataclasses
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import make_skill

from skills_agent.core import SkillMetadata, SkillNotFoundError, SkillRegistry


class HooklessSkill:
    metadata = SkillMetadata(name="hookless", description="No hooks at all")
    tools: list = []


class TestRegistration:
    def test_register_skill(self, skill_a):
        registry = SkillRegistry()
        registry.register(skill_a)

        assert registry.skill_count == 1
        assert registry.tool_count == 2
        assert registry.get("skill_a") is skill_a

    def test_register_all_preserves_order(self, skill_a, skill_b):
        registry = SkillRegistry()
        registry.register_all([skill_b, skill_a])

        assert registry.get_names() == ["skill_b", "skill_a"]

    def test_get_unknown_returns_none(self):
        assert SkillRegistry().get("nonexistent") is None

    def test_register_duplicate_overwrites_with_warning(self, caplog):
        registry = SkillRegistry()
        first = make_skill("dup", ["one"])
        second = make_skill("dup", ["two"])

        registry.register(first)
        with caplog.at_level(logging.WARNING, logger="skills_agent.core.registry"):
            registry.register(second)

        assert registry.get("dup") is second
        assert registry.skill_count == 1
        assert "already registered" in caplog.text

    @pytest.mark.asyncio
    async def test_overwrite_keeps_loaded_and_initialized_state(self):
        registry = SkillRegistry()
        registry.register(make_skill("dup", ["one"]))
        await registry.initialize_skill("dup")
        registry.load_skill("dup")

        registry.register(make_skill("dup", ["two"]))

        assert registry.is_skill_loaded("dup")
        assert registry.is_skill_initialized("dup")
        assert registry.load_skill("dup") is None


class TestMetadata:
    def test_get_all_metadata_returns_registered_metadata(self):
        registry = SkillRegistry()
        skills = [make_skill(f"skill_{i}", [f"tool_{i}"]) for i in range(3)]
        registry.register_all(skills)

        metadata = registry.get_all_metadata()

        assert [m.name for m in metadata] == ["skill_0", "skill_1", "skill_2"]
        assert all(isinstance(m, SkillMetadata) for m in metadata)

    def test_metadata_has_no_tool_schemas(self, skill_registry):
        field_names = {f.name for f in dataclasses.fields(SkillMetadata)}
        assert field_names == {"name", "description", "version", "author", "tags"}

        for metadata in skill_registry.get_all_metadata():
            assert not hasattr(metadata, "tools")

    def test_get_catalog(self, skill_registry):
        assert skill_registry.get_catalog() == "- skill_a: Skill skill_a\n- skill_b: Skill skill_b"


class TestLoading:
    def test_load_skill_returns_tools(self, skill_registry):
        loaded = skill_registry.load_skill("skill_a")

        assert loaded is not None
        assert loaded.name == "skill_a"
        assert [t.name for t in loaded.tools] == ["tool_a1", "tool_a2"]
        assert skill_registry.is_skill_loaded("skill_a")

    def test_load_skill_twice_returns_none(self, skill_registry):
        assert skill_registry.load_skill("skill_a") is not None
        assert skill_registry.load_skill("skill_a") is None
        assert skill_registry.get_loaded_skill_names() == ["skill_a"]

    def test_load_unknown_skill_returns_none(self, skill_registry, caplog):
        with caplog.at_level(logging.WARNING, logger="skills_agent.core.registry"):
            assert skill_registry.load_skill("nonexistent") is None

        assert skill_registry.get_loaded_skill_names() == []
        assert "not found" in caplog.text

    def test_loaded_names_in_load_order(self, skill_registry):
        skill_registry.load_skill("skill_b")
        skill_registry.load_skill("skill_a")

        assert skill_registry.get_loaded_skill_names() == ["skill_b", "skill_a"]

    def test_reset_loaded_skills(self, skill_registry):
        skill_registry.load_skill("skill_a")
        skill_registry.reset_loaded_skills()

        assert skill_registry.get_loaded_skill_names() == []
        assert skill_registry.load_skill("skill_a") is not None


class TestInitialization:
    @pytest.mark.asyncio
    async def test_initialize_skill_runs_hook_once(self):
        hook = AsyncMock()
        registry = SkillRegistry()
        registry.register(make_skill("hooked", ["t"], on_initialize=hook))

        await registry.initialize_skill("hooked")
        await registry.initialize_skill("hooked")

        hook.assert_awaited_once()
        assert registry.is_skill_initialized("hooked")

    @pytest.mark.asyncio
    async def test_initialize_unknown_skill_raises(self):
        with pytest.raises(SkillNotFoundError):
            await SkillRegistry().initialize_skill("nonexistent")

    @pytest.mark.asyncio
    async def test_initialize_all(self):
        hook_a = MagicMock()
        hook_b = AsyncMock()
        registry = SkillRegistry()
        registry.register_all([
            make_skill("a", ["t1"], on_initialize=hook_a),
            make_skill("b", ["t2"], on_initialize=hook_b),
            HooklessSkill(),
        ])

        await registry.initialize_all()
        await registry.initialize_all()

        hook_a.assert_called_once()
        hook_b.assert_awaited_once()
        assert registry.is_skill_initialized("hookless")

    @pytest.mark.asyncio
    async def test_initialize_all_on_empty_registry(self):
        registry = SkillRegistry()
        await registry.initialize_all()
        assert registry.skill_count == 0

    @pytest.mark.asyncio
    async def test_reset_keeps_initialization_and_skips_cleanup(self):
        cleanup = MagicMock()
        registry = SkillRegistry()
        registry.register(make_skill("hooked", ["t"], on_cleanup=cleanup))
        await registry.initialize_all()
        registry.load_skill("hooked")

        registry.reset_loaded_skills()

        assert registry.is_skill_initialized("hooked")
        cleanup.assert_not_called()


class TestCleanup:
    @pytest.mark.asyncio
    async def test_cleanup_all_runs_hooks_of_initialized_skills(self):
        cleanup = AsyncMock()
        registry = SkillRegistry()
        registry.register(make_skill("hooked", ["t"], on_cleanup=cleanup))
        await registry.initialize_all()

        await registry.cleanup_all()

        cleanup.assert_awaited_once()
        assert not registry.is_skill_initialized("hooked")

    @pytest.mark.asyncio
    async def test_cleanup_skips_uninitialized(self):
        cleanup = MagicMock()
        registry = SkillRegistry()
        registry.register(make_skill("hooked", ["t"], on_cleanup=cleanup))

        await registry.cleanup_skill("hooked")

        cleanup.assert_not_called()

    @pytest.mark.asyncio
    async def test_cleanup_unknown_skill_raises(self):
        with pytest.raises(SkillNotFoundError):
            await SkillRegistry().cleanup_skill("nonexistent")


def test_repr(skill_registry):
    skill_registry.load_skill("skill_b")
    assert repr(skill_registry) == "SkillRegistry(skills=['skill_a', 'skill_b'], loaded=['skill_b'])"
