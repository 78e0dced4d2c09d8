"""Tests for the in-memory session store."""

import asyncio
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import make_skill, router_reply
from langchain_core.messages import AIMessage

from skills_agent.core import Orchestrator
from skills_agent.sessions import SessionStore


@pytest.fixture
def cleanup_hook() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def session_store(mock_chat_model, mock_router_model, cleanup_hook) -> SessionStore:
    def factory() -> Orchestrator:
        return Orchestrator(
            mock_chat_model,
            router_model=mock_router_model,
            skills=[make_skill("notes", ["add_note"], on_cleanup=cleanup_hook)],
        )

    return SessionStore(factory)


class TestSessionStore:
    @pytest.mark.asyncio
    async def test_create_initializes_orchestrator(self, session_store):
        session = await session_store.create()

        assert session.orchestrator.is_initialized
        assert session.message_count == 0
        assert await session_store.get(session.session_id) is session
        assert await session_store.count() == 1

    @pytest.mark.asyncio
    async def test_sessions_are_isolated(self, session_store, mock_router_model):
        first = await session_store.create()
        second = await session_store.create()
        mock_router_model.ainvoke.return_value = router_reply(["notes"])

        await first.run("take a note")

        assert first.orchestrator.get_loaded_skills() == ["notes"]
        assert second.orchestrator.get_loaded_skills() == []
        assert first.session_id != second.session_id

    @pytest.mark.asyncio
    async def test_get_unknown_session(self, session_store):
        assert await session_store.get("missing") is None

    @pytest.mark.asyncio
    async def test_run_counts_messages(self, session_store):
        session = await session_store.create()
        before = session.last_accessed

        assert await session.run("hello") == "Mock response"

        assert session.message_count == 1
        assert session.last_accessed >= before

    @pytest.mark.asyncio
    async def test_failed_turn_not_counted(self, session_store, mock_chat_model):
        session = await session_store.create()
        mock_chat_model.ainvoke.side_effect = RuntimeError("provider down")

        with pytest.raises(RuntimeError):
            await session.run("hello")

        assert session.message_count == 0

    @pytest.mark.asyncio
    async def test_clear(self, session_store, mock_router_model):
        session = await session_store.create()
        mock_router_model.ainvoke.return_value = router_reply(["notes"])
        await session.run("take a note")

        await session.clear()

        assert session.message_count == 0
        assert session.orchestrator.get_loaded_skills() == []
        assert len(session.orchestrator.main_agent.history) == 0

    @pytest.mark.asyncio
    async def test_delete_runs_cleanup(self, session_store, cleanup_hook):
        session = await session_store.create()

        assert await session_store.delete(session.session_id) is True

        cleanup_hook.assert_awaited_once()
        assert await session_store.get(session.session_id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_session(self, session_store):
        assert await session_store.delete("missing") is False

    @pytest.mark.asyncio
    async def test_close_all(self, session_store, cleanup_hook):
        await session_store.create()
        await session_store.create()

        await session_store.close_all()

        assert await session_store.count() == 0
        assert cleanup_hook.await_count == 2


@pytest.fixture
def bounded_store(mock_chat_model, mock_router_model, cleanup_hook) -> SessionStore:
    return SessionStore(
        lambda: Orchestrator(
            mock_chat_model,
            router_model=mock_router_model,
            skills=[make_skill("notes", ["add_note"], on_cleanup=cleanup_hook)],
        ),
        ttl=timedelta(minutes=30),
        max_sessions=2,
    )


def make_idle(session, minutes: int) -> None:
    session.last_accessed = datetime.now() - timedelta(minutes=minutes)


class TestSessionExpiry:
    @pytest.mark.asyncio
    async def test_expired_session_is_not_returned(self, bounded_store, cleanup_hook):
        session = await bounded_store.create()
        make_idle(session, 31)

        assert await bounded_store.get(session.session_id) is None
        assert await bounded_store.count() == 0
        cleanup_hook.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_active_session_is_kept(self, bounded_store):
        session = await bounded_store.create()
        make_idle(session, 5)

        assert await bounded_store.get(session.session_id) is session

    @pytest.mark.asyncio
    async def test_prune_removes_only_idle_sessions(self, bounded_store):
        idle = await bounded_store.create()
        active = await bounded_store.create()
        make_idle(idle, 45)

        assert await bounded_store.prune() == 1

        assert [s.session_id for s in await bounded_store.list_all()] == [active.session_id]

    @pytest.mark.asyncio
    async def test_limit_evicts_least_recently_used(self, bounded_store, cleanup_hook):
        oldest = await bounded_store.create()
        newer = await bounded_store.create()
        make_idle(oldest, 10)
        make_idle(newer, 5)

        created = await bounded_store.create()

        ids = {s.session_id for s in await bounded_store.list_all()}
        assert ids == {newer.session_id, created.session_id}
        cleanup_hook.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_ids_do_not_grow_store(self, bounded_store):
        for _ in range(5):
            assert await bounded_store.get("unknown") is None
            await bounded_store.create()

        assert await bounded_store.count() == 2


class TestSessionLock:
    @pytest.mark.asyncio
    async def test_turns_are_serialized(self, mock_router_model):
        active = 0
        max_active = 0

        async def slow_reply(messages):
            nonlocal active, max_active
            active += 1
            max_active = max(max_active, active)
            await asyncio.sleep(0.01)
            active -= 1
            return AIMessage(content="ok")

        chat_model = MagicMock()
        chat_model.ainvoke = AsyncMock(side_effect=slow_reply)
        chat_model.bind_tools = MagicMock(return_value=chat_model)

        store = SessionStore(
            lambda: Orchestrator(
                chat_model,
                router_model=mock_router_model,
                skills=[make_skill("notes", ["add_note"])],
            )
        )
        session = await store.create()

        await asyncio.gather(session.run("one"), session.run("two"), session.run("three"))

        assert max_active == 1
        assert session.message_count == 3
        assert len(session.orchestrator.main_agent.history) == 6
