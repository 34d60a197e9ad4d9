"""Tests for batch detection and filtering."""

from __future__ import annotations

from resettlement_analyzer.detection.batch import batch_detect, filter_resettled
from tests.conftest import SAMPLE_RECORDS


class TestBatchDetect:
    """Test batch detection over mixed inputs."""

    def _inputs(self, transaction_log, ticket_detail):
        return [
            [SAMPLE_RECORDS["credit_draw"]],
            ticket_detail,
            transaction_log,
        ]

    def test_preserves_index_and_order(self, transaction_log, ticket_detail):
        inputs = self._inputs(transaction_log, ticket_detail)
        entries = batch_detect(inputs)
        assert [e.index for e in entries] == [0, 1, 2]
        assert [e.data for e in entries] == inputs
        assert [e.has_resettlement for e in entries] == [False, True, True]

    def test_has_resettlement_mirrors_result(self, transaction_log, ticket_detail):
        for entry in batch_detect(self._inputs(transaction_log, ticket_detail)):
            assert entry.has_resettlement == entry.result.is_resettlement

    def test_invalid_elements_do_not_fail(self):
        entries = batch_detect([None, "x", {}])
        assert len(entries) == 3
        assert entries[0].result.error == "Data must be an array or object"
        assert entries[2].result.error is None

    def test_non_sequence_gives_empty(self):
        assert batch_detect(None) == []
        assert batch_detect({"SettlementHistory": []}) == []
        assert batch_detect("abc") == []

    def test_entry_to_dict(self, ticket_detail):
        data = batch_detect([ticket_detail])[0].to_dict()
        assert data["index"] == 0
        assert data["hasResettlement"] is True
        assert data["result"]["settlementCount"] == 2
        assert data["data"] is ticket_detail


class TestFilterResettled:
    """Test filtering to positive detections."""

    def test_keeps_only_resettled_in_order(self, transaction_log, ticket_detail):
        inputs = [
            transaction_log,
            [SAMPLE_RECORDS["debit"]],
            ticket_detail,
            {},
        ]
        entries = filter_resettled(inputs)
        assert [e.index for e in entries] == [0, 2]
        assert all(e.has_resettlement for e in entries)

    def test_none_resettled(self):
        assert filter_resettled([[], {}, None]) == []

    def test_non_sequence(self):
        assert filter_resettled(42) == []
