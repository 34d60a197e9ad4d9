"""Input shape classification, resolved once at the detection boundary."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from resettlement_analyzer.ingestion.models import TicketDetail, TransactionRecord


@dataclass
class TransactionLogInput:
    """An ordered transaction log."""

    records: list[TransactionRecord]


@dataclass
class TicketDetailInput:
    """A single ticket detail record."""

    ticket: TicketDetail


@dataclass
class InvalidInput:
    """Anything that is neither a sequence nor a keyed record."""

    value: Any


DetectionInput = Union[TransactionLogInput, TicketDetailInput, InvalidInput]


def is_sequence(data: Any) -> bool:
    """Ordered sequences accepted as transaction logs (strings excluded)."""
    return isinstance(data, (list, tuple))


def classify_input(data: Any) -> DetectionInput:
    """Resolve raw JSON-like data into one of the three input variants."""
    if is_sequence(data):
        return TransactionLogInput(records=[TransactionRecord.from_dict(r) for r in data])
    if isinstance(data, Mapping):
        return TicketDetailInput(ticket=TicketDetail.from_dict(data))
    return InvalidInput(value=data)
