"""Domain services for receivables reconciliation.

Balances, payments and title groups are computed from ledger records of the
outstanding module. Canonical totals are converted record by record, using
the record's own exchange rate when present and the receivables default
rate table otherwise. Native-currency sub-totals are kept unconverted.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from gemdash.domain.constants import (
    CANONICAL_CURRENCY,
    CURRENCY_COLORS,
    OVERDUE_BALANCE_THRESHOLD,
)
from gemdash.domain.models.finance import (
    ClearingStatus,
    CurrencyAmounts,
    CurrencyShare,
    CustomerSummary,
    PaymentSourceSummary,
    TitleBreakdown,
)
from gemdash.domain.models.records import LedgerRecord
from gemdash.domain.services.fx import RECEIVABLES_RATES, to_canonical
from gemdash.domain.services.validation import validate_ledger_record


def parse_iso_date(value: str) -> date | None:
    """Parse the date part of an ISO date or datetime string."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def classify_balance(balance: Decimal) -> ClearingStatus:
    """Classify a customer balance held in canonical currency."""
    if balance <= 0:
        return ClearingStatus.CLEARED
    if balance > OVERDUE_BALANCE_THRESHOLD:
        return ClearingStatus.OVERDUE
    return ClearingStatus.PENDING


def _convert(
    amount: Decimal,
    record: LedgerRecord,
    logger: Logger | None,
) -> Decimal:
    return to_canonical(
        amount,
        record.currency,
        record.exchange_rate,
        RECEIVABLES_RATES,
        logger,
    )


def summarize_payment_source(
    source: str,
    records: list[LedgerRecord],
    logger: Logger | None = None,
) -> PaymentSourceSummary | None:
    """Total the payments received through one payment tab.

    Args:
        source: Payment tab identifier.
        records: Payment records read from the tab.
        logger: Optional logger for conversion warnings.

    Returns:
        PaymentSourceSummary | None: None when the tab holds no records.
    """
    if not records:
        return None
    total = sum(
        (_convert(record.paid_amount, record, logger) for record in records),
        Decimal("0"),
    )
    dates = [
        parsed
        for parsed in (parse_iso_date(r.payment_date) for r in records)
        if parsed is not None
    ]
    last_date = max(dates).isoformat() if dates else ""
    return PaymentSourceSummary(
        source=source,
        total=total,
        count=len(records),
        last_date=last_date,
    )


def summarize_customer(
    name: str,
    records: list[LedgerRecord],
    logger: Logger | None = None,
) -> CustomerSummary | None:
    """Aggregate a customer ledger tab into a balance.

    Args:
        name: Customer tab identifier.
        records: Ledger records read from the tab.
        logger: Optional logger for data warnings.

    Returns:
        CustomerSummary | None: None when the tab holds no records.
    """
    if not records:
        return None
    invoice_total = Decimal("0")
    paid_total = Decimal("0")
    balance = Decimal("0")
    native = {code: Decimal("0") for code in ("LKR", "USD", "THB", "RMB")}

    for record in records:
        if logger is not None:
            validate_ledger_record(name, record, logger)
        outstanding = record.outstanding
        invoice_total += _convert(record.invoice_amount, record, logger)
        paid_total += _convert(record.paid_amount, record, logger)
        balance += _convert(outstanding, record, logger)
        if record.currency in native:
            native[record.currency] += outstanding

    return CustomerSummary(
        name=name,
        invoice_total=invoice_total,
        paid_total=paid_total,
        balance=balance,
        lkr=native["LKR"],
        usd=native["USD"],
        thb=native["THB"],
        rmb=native["RMB"],
        status=classify_balance(balance),
    )


def build_currency_breakdown(
    customers: Iterable[CustomerSummary],
) -> list[CurrencyShare]:
    """Split outstanding balances by currency for a proportion chart.

    Foreign sub-totals are converted with the receivables default rates.
    Currencies with no positive share are left out.
    """
    totals = {code: Decimal("0") for code in CURRENCY_COLORS}
    for customer in customers:
        totals["LKR"] += customer.lkr
        totals["USD"] += customer.usd * RECEIVABLES_RATES["USD"]
        totals["RMB"] += customer.rmb * RECEIVABLES_RATES["RMB"]
        totals["THB"] += customer.thb * RECEIVABLES_RATES["THB"]
    return [
        CurrencyShare(name=code, value=value, color=CURRENCY_COLORS[code])
        for code, value in totals.items()
        if value > 0
    ]


def reconcile_titles(
    records: Iterable[LedgerRecord],
    today: date,
    logger: Logger | None = None,
) -> list[TitleBreakdown]:
    """Group sales records sharing a title across tabs.

    Titles are compared exactly after trimming; untitled records are
    skipped. Each titled record lands in exactly one group.

    Args:
        records: Ledger records tagged with their source tab.
        today: Reference date for overdue detection.
        logger: Optional logger for conversion warnings.

    Returns:
        list[TitleBreakdown]: Groups sorted by final amount, largest first.
    """
    groups: dict[str, list[LedgerRecord]] = {}
    for record in records:
        if not record.title:
            continue
        groups.setdefault(record.title, []).append(record)

    breakdowns = [
        _build_title(title, members, today, logger)
        for title, members in groups.items()
    ]
    return sorted(
        breakdowns,
        key=lambda item: (-item.final_amount, item.title),
    )


def _build_title(
    title: str,
    members: list[LedgerRecord],
    today: date,
    logger: Logger | None,
) -> TitleBreakdown:
    currencies: dict[str, CurrencyAmounts] = {
        CANONICAL_CURRENCY: CurrencyAmounts()
    }
    final_amount = Decimal("0")
    received = Decimal("0")
    outstanding = Decimal("0")
    overdue = False

    for record in members:
        bucket = currencies.setdefault(record.currency, CurrencyAmounts())
        bucket.total += record.invoice_amount
        bucket.outstanding += record.outstanding
        final_amount += _convert(record.invoice_amount, record, logger)
        received += _convert(record.paid_amount, record, logger)
        outstanding += _convert(record.outstanding, record, logger)
        due = parse_iso_date(record.due_date)
        if due is not None and due < today:
            overdue = True

    if outstanding <= 0:
        status = ClearingStatus.CLEARED
    elif overdue:
        status = ClearingStatus.OVERDUE
    else:
        status = ClearingStatus.PENDING

    return TitleBreakdown(
        title=title,
        currencies=currencies,
        final_amount=final_amount,
        received_payments=received,
        outstanding=outstanding,
        status=status,
        transactions=list(members),
        source_tabs=sorted({r.source_tab for r in members if r.source_tab}),
    )


def summarize_ledger_totals(
    records: Iterable[LedgerRecord],
    logger: Logger | None = None,
) -> tuple[Decimal, Decimal]:
    """Return (outstanding, received) in canonical currency."""
    outstanding = Decimal("0")
    received = Decimal("0")
    for record in records:
        outstanding += _convert(record.outstanding, record, logger)
        received += _convert(record.paid_amount, record, logger)
    return outstanding, received


__all__ = [
    "parse_iso_date",
    "classify_balance",
    "summarize_payment_source",
    "summarize_customer",
    "build_currency_breakdown",
    "reconcile_titles",
    "summarize_ledger_totals",
]
