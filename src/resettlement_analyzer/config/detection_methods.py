"""Detection method tags and their localized descriptions."""

from __future__ import annotations

# Heuristics that yield a positive classification
MULTIPLE_SETTLEMENT_ENTRIES = "Multiple settlement history entries"
MULTIPLE_CREDIT_OPERATIONS = "Multiple credit_customer operations"
STATUS_CHANGE_FROM_SETTLED = "Status change from settled state"
MULTIPLE_PROCESSED_INPUTS = "Multiple processed inputs"
RESETTLEMENT_FLAG = "IsResettlement flag in XML"

RESETTLEMENT_METHODS: frozenset[str] = frozenset({
    MULTIPLE_SETTLEMENT_ENTRIES,
    MULTIPLE_CREDIT_OPERATIONS,
    STATUS_CHANGE_FROM_SETTLED,
    MULTIPLE_PROCESSED_INPUTS,
    RESETTLEMENT_FLAG,
})

# Negative outcomes
NO_CREDIT_OPERATIONS = "No credit operations found"
SINGLE_CREDIT_WITHOUT_FLAG = "Single credit operation without resettlement flag"
NO_RESETTLEMENT_IN_TICKET = "No resettlement detected in ticket detail"
INVALID_DATA_FORMAT = "Invalid data format"

INVALID_DATA_MESSAGE = "Data must be an array or object"

METHOD_DESCRIPTIONS_ZH: dict[str, str] = {
    MULTIPLE_SETTLEMENT_ENTRIES: "多次結算記錄",
    MULTIPLE_CREDIT_OPERATIONS: "多次信用操作",
    STATUS_CHANGE_FROM_SETTLED: "從已結算狀態變更",
    MULTIPLE_PROCESSED_INPUTS: "多次處理輸入",
    RESETTLEMENT_FLAG: "XML重新結算標記",
}


def method_description(method: str, locale: str = "zh") -> str:
    """Describe a detection method tag for the given locale.

    English always shows the raw tag. Chinese maps known tags and shows
    anything else verbatim.
    """
    if locale == "en":
        return method
    description = METHOD_DESCRIPTIONS_ZH.get(method)
    if description is None:
        return method
    return description
