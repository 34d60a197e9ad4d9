"""Shared test fixtures and sample records."""

from __future__ import annotations

import copy

import pytest

from resettlement_analyzer.samples import SAMPLE_TICKET_DETAIL, SAMPLE_TRANSACTION_LOG


def credit(reqparams: str = "", **fields) -> dict:
    """Build a credit_customer transaction record."""
    record = {"operationType": "credit_customer", "reqparams": reqparams}
    record.update(fields)
    return record


def settlement(old: int, new: int, **fields) -> dict:
    """Build a settlement history entry."""
    entry = {"OldBetStatus": old, "NewBetStatus": new}
    entry.update(fields)
    return entry


# Raw transaction log records as returned by the wallet op-log
SAMPLE_RECORDS = {
    "debit": {
        "id": "1703265000",
        "operationType": "debit_customer",
        "reqtypeid": 11,
        "amount": "-500.00",
        "balance": "9500.00",
    },
    "credit_draw": credit(
        '<Bet Id="1" IsResettlement="0" OldStatus="Opened" NewStatus="Draw" />',
        id="1703265824",
        amount="1000.00",
        balance="10500.00",
        creationdate="2025-11-08T20:22:22.894Z",
        requestid="req-1",
        queryparams='{"purchase_id":"775089056288182272","bet_id":"1"}',
    ),
    "credit_won": credit(
        '<Bet Id="1" IsResettlement="1" OldStatus="Draw" NewStatus="Won" />',
        id="1703298117",
        amount="1060.00",
        balance="11560.00",
        creationdate="2025-11-08T20:48:27.554Z",
        requestid="req-2",
    ),
    "reqtype_credit": {
        "id": "1703300000",
        "reqtypeid": 12,
        "amount": "50.00",
        "reqparams": '<Bet OldStatus="Won" NewStatus="Lost" />',
    },
}


@pytest.fixture
def transaction_log():
    """Two-credit transaction log (Draw corrected to Won)."""
    return copy.deepcopy(SAMPLE_TRANSACTION_LOG)


@pytest.fixture
def ticket_detail():
    """Ticket detail with a two-entry settlement history."""
    return copy.deepcopy(SAMPLE_TICKET_DETAIL)
