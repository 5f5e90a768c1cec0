"""Tests for the change recorders and summary rendering."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, call

import pytest

from docdelta.diff.recorder import AsyncSectionChangeRecorder, SectionChangeRecorder
from docdelta.diff.summary import NO_CHANGES, build_summary
from docdelta.models import ChangeCounts, ChangeRecordCreated, ChangeRecordInput, ChangeType


def _record(change_type: ChangeType, title: str) -> ChangeRecordInput:
    return ChangeRecordInput(
        draft_id=1, doc_id=2, change_type=change_type,
        section_title=title, content=f"# {title}\n",
    )


RECORDS = [
    _record(ChangeType.UPDATE, "A"),
    _record(ChangeType.UPDATE, "B"),
    _record(ChangeType.INSERT_AFTER, "C"),
    _record(ChangeType.DELETE, "D"),
]


# =========================================================================
# Summary
# =========================================================================


class TestBuildSummary:
    @pytest.mark.parametrize(
        ("counts", "expected"),
        [
            (ChangeCounts(), NO_CHANGES),
            (ChangeCounts(updated=1), "1 section updated"),
            (ChangeCounts(updated=2), "2 sections updated"),
            (ChangeCounts(inserted=1), "1 section added"),
            (ChangeCounts(deleted=3), "3 sections deleted"),
            (ChangeCounts(updated=2, inserted=1), "2 sections updated, 1 section added"),
            (ChangeCounts(updated=1, deleted=1), "1 section updated, 1 section deleted"),
            (
                ChangeCounts(updated=2, inserted=1, deleted=4),
                "2 sections updated, 1 section added, 4 sections deleted",
            ),
        ],
    )
    def test_summary(self, counts, expected):
        assert build_summary(counts) == expected

    def test_no_changes_constant(self):
        assert NO_CHANGES == "No changes"


class TestChangeCounts:
    def test_add_and_total(self):
        counts = ChangeCounts()
        for record in RECORDS:
            counts.add(record.change_type)
        assert (counts.updated, counts.inserted, counts.deleted) == (2, 1, 1)
        assert counts.total == 4


# =========================================================================
# Sync recorder
# =========================================================================


class TestSectionChangeRecorder:
    def test_records_in_order_and_tallies(self, store):
        result = SectionChangeRecorder(store).record(RECORDS)
        assert [c.record for c in store.created] == RECORDS
        assert [c.id for c in result.records] == [1, 2, 3, 4]
        assert result.has_changes is True
        assert result.change_count == 4
        assert result.summary == "2 sections updated, 1 section added, 1 section deleted"

    def test_empty_input(self, store):
        result = SectionChangeRecorder(store).record([])
        assert result.has_changes is False
        assert result.change_count == 0
        assert result.summary == NO_CHANGES

    def test_each_record_passed_once(self):
        persistence = MagicMock()
        persistence.create_section_change.side_effect = lambda r: ChangeRecordCreated(id=r.section_title, record=r)
        result = SectionChangeRecorder(persistence).record(RECORDS)
        assert persistence.create_section_change.call_args_list == [call(r) for r in RECORDS]
        assert [c.id for c in result.records] == ["A", "B", "C", "D"]

    def test_failure_stops_remaining_records(self):
        persistence = MagicMock()
        persistence.create_section_change.side_effect = [
            ChangeRecordCreated(id=1, record=RECORDS[0]),
            ValueError("rejected"),
        ]
        with pytest.raises(ValueError, match="rejected"):
            SectionChangeRecorder(persistence).record(RECORDS)
        assert persistence.create_section_change.call_count == 2

    def test_metrics_counters_grouped_by_type(self, store, config):
        config.metrics = MagicMock()
        SectionChangeRecorder(store, config).record(RECORDS)
        assert config.metrics.increment.call_args_list == [
            call("docdelta.section_changes_total", 2, tags={"change_type": "update"}),
            call("docdelta.section_changes_total", 1, tags={"change_type": "insert-after"}),
            call("docdelta.section_changes_total", 1, tags={"change_type": "delete"}),
        ]

    def test_no_metrics_after_failure(self, config):
        config.metrics = MagicMock()
        persistence = MagicMock()
        persistence.create_section_change.side_effect = RuntimeError("down")
        with pytest.raises(RuntimeError):
            SectionChangeRecorder(persistence, config).record(RECORDS)
        config.metrics.increment.assert_not_called()


# =========================================================================
# Async recorder
# =========================================================================


class TestAsyncSectionChangeRecorder:
    @pytest.mark.asyncio
    async def test_records_in_order(self, async_store):
        result = await AsyncSectionChangeRecorder(async_store).record(RECORDS)
        assert [c.record for c in async_store.created] == RECORDS
        assert result.change_count == 4

    @pytest.mark.asyncio
    async def test_failure_stops_remaining_records(self):
        persistence = MagicMock()
        persistence.create_section_change = AsyncMock(
            side_effect=[ChangeRecordCreated(id=1, record=RECORDS[0]), RuntimeError("down")],
        )
        with pytest.raises(RuntimeError, match="down"):
            await AsyncSectionChangeRecorder(persistence).record(RECORDS)
        assert persistence.create_section_change.await_count == 2
