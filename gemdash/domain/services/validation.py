"""Domain validation helpers."""

from logging import Logger

from gemdash.domain.models.records import LedgerRecord


def validate_ledger_record(
    tab: str,
    record: LedgerRecord,
    logger: Logger,
) -> None:
    """Warn when a ledger line looks inconsistent.

    Inconsistent lines are still aggregated; the warning only helps trace
    data-entry mistakes in the source tabs.

    Args:
        tab: Tab the record was read from.
        record: Ledger record to check.
        logger: Logger used for warnings.
    """
    if record.invoice_amount < 0:
        logger.warning(
            f"Negative invoice amount in tab={tab}: {record.invoice_amount}"
        )
    if record.paid_amount > record.invoice_amount > 0:
        logger.warning(
            f"Paid amount exceeds invoice in tab={tab}: "
            f"paid={record.paid_amount}, invoice={record.invoice_amount}"
        )


__all__ = ["validate_ledger_record"]
