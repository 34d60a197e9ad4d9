"""Reference inputs for both accepted formats, used by ``resettle sample``."""

from __future__ import annotations

# Wallet transaction log: a Draw settlement later corrected to Won
SAMPLE_TRANSACTION_LOG: list[dict] = [
    {
        "id": "1703265824",
        "operationType": "credit_customer",
        "amount": "1000.00",
        "creationdate": "2025-11-08T20:22:22.894Z",
        "reqparams": '<Bet ... IsResettlement="0" OldStatus="Opened" NewStatus="Draw" .../>',
    },
    {
        "id": "1703298117",
        "operationType": "credit_customer",
        "amount": "1060.00",
        "creationdate": "2025-11-08T20:48:27.554Z",
        "reqparams": '<Bet ... IsResettlement="1" OldStatus="Draw" NewStatus="Won" .../>',
    },
]

# Ticket detail with a two-step settlement history, the second one manual
SAMPLE_TICKET_DETAIL: dict = {
    "SQLTicketId": 775089054982303744,
    "ReserveId": 775089056288182272,
    "SettlementHistory": [
        {
            "DateUpdated": "2025-11-08T20:22:22.8257767Z",
            "OldBetStatus": 0,
            "NewBetStatus": 3,
            "Gain": 1000,
            "PreviousBalance": 0,
            "EmployeeId": 0,
        },
        {
            "DateUpdated": "2025-11-08T20:48:26.1542776Z",
            "OldBetStatus": 3,
            "NewBetStatus": 2,
            "Gain": 2060,
            "PreviousBalance": 1000,
            "EmployeeId": 1266,
        },
    ],
}

SAMPLES: dict[str, object] = {
    "transaction_log": SAMPLE_TRANSACTION_LOG,
    "ticket_detail": SAMPLE_TICKET_DETAIL,
}
