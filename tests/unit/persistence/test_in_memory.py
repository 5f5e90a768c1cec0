"""Tests for the in-memory section change stores."""

from __future__ import annotations

import pytest

from docdelta.models import ChangeRecordInput, ChangeType
from docdelta.persistence import (
    AsyncInMemorySectionChangesPersistence,
    AsyncSectionChangesPersistence,
    HttpSectionChangesPersistence,
    InMemorySectionChangesPersistence,
    SectionChangesPersistence,
)


def _record(draft_id: int, title: str) -> ChangeRecordInput:
    return ChangeRecordInput(
        draft_id=draft_id, doc_id=1, change_type=ChangeType.UPDATE,
        section_title=title, content=f"# {title}\n",
    )


class TestInMemoryStore:
    def test_sequential_ids(self, store):
        first = store.create_section_change(_record(1, "A"))
        second = store.create_section_change(_record(1, "B"))
        assert (first.id, second.id) == (1, 2)
        assert store.created == [first, second]

    def test_for_draft_filters(self, store):
        store.create_section_change(_record(1, "A"))
        store.create_section_change(_record(2, "B"))
        store.create_section_change(_record(1, "C"))
        assert [c.record.section_title for c in store.for_draft(1)] == ["A", "C"]
        assert [c.id for c in store.for_draft(2)] == [2]
        assert store.for_draft(3) == []

    @pytest.mark.asyncio
    async def test_async_store(self, async_store):
        created = await async_store.create_section_change(_record(1, "A"))
        assert created.id == 1
        assert async_store.for_draft(1) == [created]


class TestProtocols:
    def test_stores_satisfy_protocols(self, store, async_store, config):
        assert isinstance(store, SectionChangesPersistence)
        assert isinstance(async_store, AsyncSectionChangesPersistence)
        with HttpSectionChangesPersistence(config) as http_store:
            assert isinstance(http_store, SectionChangesPersistence)

    def test_unrelated_object_is_not_a_store(self):
        assert not isinstance(object(), SectionChangesPersistence)
        assert isinstance(InMemorySectionChangesPersistence(), SectionChangesPersistence)
        assert isinstance(AsyncInMemorySectionChangesPersistence(), AsyncSectionChangesPersistence)
