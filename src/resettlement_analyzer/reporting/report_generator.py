"""Chat-ready resettlement reports in Chinese and English."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from resettlement_analyzer.config.detection_methods import method_description
from resettlement_analyzer.detection.models import (
    DetectionResult,
    OperationDescriptor,
    SettlementDescriptor,
)

HEAVY_RULE = "━━━━━━━━━━━━━━━━"
LIGHT_RULE = "─────────────────"
NOT_AVAILABLE = "N/A"

DEFAULT_LOCALE = "zh"

# Fractional seconds arrive with 1-7 digits; fromisoformat wants exactly 6 on 3.10
_RE_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


@dataclass(frozen=True)
class ReportTemplate:
    """Literal strings for one report language."""

    no_resettlement: str
    header: str
    ticket_id: str
    purchase_id: str
    method: str
    settlement_history: str
    settlement_title: str
    operation_log: str
    operation_title: str
    time: str
    status_change: str
    operation_status: str
    amount: str
    previous_balance: str
    balance: str
    operator: str
    manual: str
    automatic: str
    footer_notice: str
    footer_advice: str
    short_clear: str
    short_resettled: str


TEMPLATES: dict[str, ReportTemplate] = {
    "zh": ReportTemplate(
        no_resettlement="✅ 此注單無重新結算記錄",
        header="⚠️ 偵測到重新結算",
        ticket_id="📋 注單ID: {}",
        purchase_id="🎫 Purchase ID: {}",
        method="🔍 檢測方式: {}",
        settlement_history="📊 結算歷程 (共 {} 次):",
        settlement_title="【第 {} 次結算】",
        operation_log="📊 交易記錄 (共 {} 次):",
        operation_title="【第 {} 次】",
        time="⏰ 時間: {}",
        status_change="📍 狀態變化: {} → {}",
        operation_status="📍 狀態: {} → {}",
        amount="💰 金額: {}",
        previous_balance="💵 前次餘額: {}",
        balance="💵 餘額: {}",
        operator="👤 操作: {}",
        manual="人工介入 (ID: {})",
        automatic="系統自動",
        footer_notice="⚠️ 請注意：此注單經過重新結算",
        footer_advice="建議核對最終結算金額與狀態",
        short_clear="✅ 無重新結算",
        short_resettled="⚠️ 重新結算 ({}次)",
    ),
    "en": ReportTemplate(
        no_resettlement="✅ No resettlement detected for this bet",
        header="⚠️ RESETTLEMENT DETECTED",
        ticket_id="📋 Ticket ID: {}",
        purchase_id="🎫 Purchase ID: {}",
        method="🔍 Detection Method: {}",
        settlement_history="📊 Settlement History ({} times):",
        settlement_title="【Settlement #{}】",
        operation_log="📊 Transaction Log ({} times):",
        operation_title="【Transaction #{}】",
        time="⏰ Time: {}",
        status_change="📍 Status: {} → {}",
        operation_status="📍 Status: {} → {}",
        amount="💰 Amount: {}",
        previous_balance="💵 Previous Balance: {}",
        balance="💵 Balance: {}",
        operator="👤 Operation: {}",
        manual="Manual (ID: {})",
        automatic="Automatic",
        footer_notice="⚠️ Note: This bet has been resettled",
        footer_advice="Please verify the final settlement amount and status",
        short_clear="✅ No resettlement",
        short_resettled="⚠️ Resettled ({} times)",
    ),
}


def get_template(locale: str) -> ReportTemplate:
    """Template for ``locale``; unknown locales get the default (zh)."""
    return TEMPLATES.get(locale, TEMPLATES[DEFAULT_LOCALE])


def render_full(result: DetectionResult, locale: str = DEFAULT_LOCALE) -> str:
    """Render the full multi-section report for a detection result."""
    t = get_template(locale)
    if not result.is_resettlement:
        return t.no_resettlement

    lines = [t.header, HEAVY_RULE, ""]
    if result.ticket_id:
        lines.append(t.ticket_id.format(result.ticket_id))
    if result.purchase_id:
        lines.append(t.purchase_id.format(result.purchase_id))
    lines.append(t.method.format(method_description(result.method, locale)))
    lines.append("")

    if result.settlements:
        lines.append(t.settlement_history.format(len(result.settlements)))
        lines.append(HEAVY_RULE)
        for i, settlement in enumerate(result.settlements, 1):
            lines.append("")
            lines.extend(_settlement_lines(t, i, settlement))
            if i < len(result.settlements):
                lines.append(LIGHT_RULE)
    elif result.operations:
        lines.append(t.operation_log.format(len(result.operations)))
        lines.append(HEAVY_RULE)
        for i, op in enumerate(result.operations, 1):
            lines.append("")
            lines.extend(_operation_lines(t, i, op))
            if i < len(result.operations):
                lines.append(LIGHT_RULE)

    lines.extend(["", HEAVY_RULE, t.footer_notice, t.footer_advice])
    return "\n".join(lines)


def render_short(result: DetectionResult, locale: str = DEFAULT_LOCALE) -> str:
    """One-line summary with the settlement (or credit) count."""
    t = get_template(locale)
    if not result.is_resettlement:
        return t.short_clear
    return t.short_resettled.format(result.event_count)


def _settlement_lines(t: ReportTemplate, number: int, settlement: SettlementDescriptor) -> list[str]:
    lines = [
        t.settlement_title.format(number),
        t.time.format(format_datetime(settlement.date)),
        t.status_change.format(settlement.old_status, settlement.new_status),
        # zero gain renders as N/A
        t.amount.format(_display(settlement.gain) if settlement.gain else NOT_AVAILABLE),
    ]
    if settlement.previous_balance is not None:
        lines.append(t.previous_balance.format(_display(settlement.previous_balance)))

    if settlement.is_manual:
        operator = t.manual.format(_display(settlement.employee_id))
    else:
        operator = t.automatic
    lines.append(t.operator.format(operator))
    return lines


def _operation_lines(t: ReportTemplate, number: int, op: OperationDescriptor) -> list[str]:
    return [
        t.operation_title.format(number),
        t.time.format(format_datetime(op.date)),
        t.operation_status.format(op.old_status, op.new_status),
        t.amount.format(_display(op.amount)),
        t.balance.format(_display(op.balance)),
    ]


def _display(value: Any) -> str:
    """Render a scalar the way it appears in the source JSON."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_datetime(value: Any) -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM:SS`` in local time.

    Empty values give ``N/A``; strings that do not parse are returned as-is.
    Offset-aware timestamps are converted to the local zone, naive ones
    are taken to be local already. Only ISO-8601 strings are parsed:
    slash-separated dates and epoch numbers come back unformatted.
    """
    if not value:
        return NOT_AVAILABLE

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = _RE_FRACTION.sub(_pad_fraction, value.strip())
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return value
    else:
        return str(value)

    try:
        if dt.tzinfo is not None:
            dt = dt.astimezone()
    except (OverflowError, ValueError):
        return str(value)

    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def _pad_fraction(m: re.Match) -> str:
    return f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}"
