"""Resettlement detection over a single ticket detail record."""

from __future__ import annotations

import logging

from resettlement_analyzer.config import detection_methods as methods
from resettlement_analyzer.config.bet_status import is_settled_status, status_name
from resettlement_analyzer.detection.models import DetectionResult, SettlementDescriptor
from resettlement_analyzer.ingestion.models import SettlementHistoryEntry, TicketDetail

logger = logging.getLogger(__name__)


class TicketDetailDetector:
    """Applies the ticket heuristics in precedence order; first hit wins.

    1. More than one settlement history entry.
    2. A single entry that moves away from Won/Draw/Lost, which a first
       settlement never does.
    3. Any processed-input group with more than one entry, scanned in
       insertion order.
    """

    def detect(self, ticket: TicketDetail) -> DetectionResult:
        history = ticket.settlement_history

        if len(history) > 1:
            logger.debug("Ticket %s has %d settlement entries", ticket.sql_ticket_id, len(history))
            return DetectionResult(
                is_resettlement=True,
                method=methods.MULTIPLE_SETTLEMENT_ENTRIES,
                settlement_count=len(history),
                settlements=[self._describe(h) for h in history],
                ticket_id=ticket.sql_ticket_id,
                purchase_id=ticket.reserve_id,
            )

        if len(history) == 1 and is_settled_status(history[0].old_bet_status):
            entry = history[0]
            logger.debug(
                "Ticket %s changed from settled status %s",
                ticket.sql_ticket_id, entry.old_bet_status,
            )
            return DetectionResult(
                is_resettlement=True,
                method=methods.STATUS_CHANGE_FROM_SETTLED,
                settlement_count=1,
                settlements=[SettlementDescriptor(
                    date=entry.date_updated,
                    old_status=status_name(entry.old_bet_status),
                    new_status=status_name(entry.new_bet_status),
                    gain=entry.gain,
                    employee_id=entry.employee_id,
                )],
                ticket_id=ticket.sql_ticket_id,
            )

        result = self._check_processed_inputs(ticket)
        if result is not None:
            return result

        return DetectionResult(
            is_resettlement=False,
            method=methods.NO_RESETTLEMENT_IN_TICKET,
        )

    def _check_processed_inputs(self, ticket: TicketDetail) -> DetectionResult | None:
        if not ticket.processed_inputs:
            return None

        for key, inputs in ticket.processed_inputs.items():
            if isinstance(inputs, (list, tuple)) and len(inputs) > 1:
                logger.debug("Processed input group %r has %d entries", key, len(inputs))
                return DetectionResult(
                    is_resettlement=True,
                    method=methods.MULTIPLE_PROCESSED_INPUTS,
                    input_count=len(inputs),
                    processed_inputs=ticket.processed_inputs,
                    ticket_id=ticket.sql_ticket_id,
                )
        return None

    def _describe(self, entry: SettlementHistoryEntry) -> SettlementDescriptor:
        return SettlementDescriptor(
            date=entry.date_updated,
            old_status=status_name(entry.old_bet_status),
            new_status=status_name(entry.new_bet_status),
            gain=entry.gain,
            previous_balance=entry.previous_balance,
            employee_id=entry.employee_id,
            account_operation_id=entry.account_operation_id,
        )
