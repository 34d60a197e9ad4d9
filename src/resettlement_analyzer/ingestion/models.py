"""Data models for the two accepted input shapes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

CREDIT_OPERATION_TYPE = "credit_customer"
CREDIT_REQTYPE_ID = 12


def _text(raw: Mapping, key: str) -> Optional[str]:
    """Return ``raw[key]`` if it is a string, else None."""
    value = raw.get(key)
    return value if isinstance(value, str) else None


@dataclass
class TransactionRecord:
    """One entry of a wallet transaction log."""

    id: Any = None
    operation_type: Any = None
    reqtypeid: Any = None
    reqparams: Optional[str] = None  # may embed <Bet ... OldStatus="" NewStatus=""/>
    queryparams: Optional[str] = None  # may embed "purchase_id":"..."
    amount: Any = None
    balance: Any = None
    creation_date: Any = None
    request_id: Any = None
    op_log_purchase_id: Any = None
    raw: Mapping = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, raw: Any) -> TransactionRecord:
        if not isinstance(raw, Mapping):
            return cls(raw={})
        return cls(
            id=raw.get("id"),
            operation_type=raw.get("operationType"),
            reqtypeid=raw.get("reqtypeid"),
            reqparams=_text(raw, "reqparams"),
            queryparams=_text(raw, "queryparams"),
            amount=raw.get("amount"),
            balance=raw.get("balance"),
            creation_date=raw.get("creationdate"),
            request_id=raw.get("requestid"),
            op_log_purchase_id=raw.get("opLogPurchaseId"),
            raw=raw,
        )

    @property
    def is_credit(self) -> bool:
        """Payout to the customer, by operation name or request type."""
        if self.operation_type == CREDIT_OPERATION_TYPE:
            return True
        return (
            isinstance(self.reqtypeid, (int, float))
            and not isinstance(self.reqtypeid, bool)
            and self.reqtypeid == CREDIT_REQTYPE_ID
        )


@dataclass
class SettlementHistoryEntry:
    """One recorded status transition of a ticket."""

    date_updated: Any = None
    old_bet_status: Any = None
    new_bet_status: Any = None
    gain: Any = None
    previous_balance: Any = None
    employee_id: Any = None  # 0 / falsy = system, > 0 = operator id
    account_operation_id: Any = None

    @classmethod
    def from_dict(cls, raw: Any) -> SettlementHistoryEntry:
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            date_updated=raw.get("DateUpdated"),
            old_bet_status=raw.get("OldBetStatus"),
            new_bet_status=raw.get("NewBetStatus"),
            gain=raw.get("Gain"),
            previous_balance=raw.get("PreviousBalance"),
            employee_id=raw.get("EmployeeId"),
            account_operation_id=raw.get("AccountOperationId"),
        )


@dataclass
class TicketDetail:
    """A single ticket record with its settlement history."""

    sql_ticket_id: Any = None
    reserve_id: Any = None
    settlement_history: list[SettlementHistoryEntry] = field(default_factory=list)
    # Input group key -> entries, in source insertion order
    processed_inputs: Optional[Mapping] = None
    raw: Mapping = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, raw: Mapping) -> TicketDetail:
        history = raw.get("SettlementHistory")
        if not isinstance(history, (list, tuple)):
            history = []

        processed = raw.get("ProcessedInputs")
        if not isinstance(processed, Mapping):
            processed = None

        return cls(
            sql_ticket_id=raw.get("SQLTicketId"),
            reserve_id=raw.get("ReserveId"),
            settlement_history=[SettlementHistoryEntry.from_dict(h) for h in history],
            processed_inputs=processed,
            raw=raw,
        )
