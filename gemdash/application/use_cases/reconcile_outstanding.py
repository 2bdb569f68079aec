"""Use case to reconcile receivables across payment and customer tabs."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from gemdash.application.use_cases.ledger_reader import LedgerReader
from gemdash.domain.constants import (
    CUSTOMER_TABS,
    OUTSTANDING_MODULE_ID,
    PAYMENT_TABS,
    SALES_TABS,
)
from gemdash.domain.models.finance import OutstandingReport
from gemdash.domain.services.outstanding import (
    build_currency_breakdown,
    reconcile_titles,
    summarize_customer,
    summarize_payment_source,
)
from gemdash.infrastructure.logging.logger import get_app_logger


class ReconcileOutstandingUseCase:
    """Aggregate payments, customer balances and cross-tab titles."""

    def __init__(
        self,
        reader: LedgerReader,
        logger=None,
        today: Callable[[], date] = date.today,
        module_id: str = OUTSTANDING_MODULE_ID,
        payment_tabs: tuple[str, ...] = PAYMENT_TABS,
        customer_tabs: tuple[str, ...] = CUSTOMER_TABS,
        sales_tabs: tuple[str, ...] = SALES_TABS,
    ) -> None:
        """Initialize the use case.

        Args:
            reader: Reader providing typed records from the store.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock used to flag titles past their due date.
            module_id: Module holding the receivable ledgers.
            payment_tabs: Tabs tracking received payments.
            customer_tabs: Tabs holding one customer ledger each.
            sales_tabs: Customer tabs whose records are grouped by title.
        """
        self._reader = reader
        self._logger = logger or get_app_logger()
        self._today = today
        self._module_id = module_id
        self._payment_tabs = payment_tabs
        self._customer_tabs = customer_tabs
        self._sales_tabs = sales_tabs

    def execute(self) -> OutstandingReport:
        """Return the receivables reconciliation for the current store.

        Returns:
            OutstandingReport: Payment sources, customer balances, currency
            shares and title groups. Every total is zero for an empty store.
        """
        payment_sources = []
        for tab in self._payment_tabs:
            summary = summarize_payment_source(
                tab,
                self._reader.load_ledger(self._module_id, tab),
                self._logger,
            )
            if summary is not None:
                payment_sources.append(summary)

        customers = []
        for tab in self._customer_tabs:
            summary = summarize_customer(
                tab,
                self._reader.load_ledger(self._module_id, tab),
                self._logger,
            )
            if summary is not None:
                customers.append(summary)
        customers.sort(key=lambda customer: customer.balance, reverse=True)

        sales_records = []
        for tab in self._sales_tabs:
            sales_records.extend(
                self._reader.load_ledger(self._module_id, tab)
            )
        titles = reconcile_titles(sales_records, self._today(), self._logger)

        report = OutstandingReport(
            total_received=sum(
                (source.total for source in payment_sources),
                Decimal("0"),
            ),
            payment_sources=payment_sources,
            customers=customers,
            currency_breakdown=build_currency_breakdown(customers),
            titles=titles,
        )
        self._logger.info(
            f"Outstanding reconciled: customers={len(customers)}, "
            f"sources={len(payment_sources)}, titles={len(titles)}, "
            f"outstanding={report.total_outstanding}"
        )
        return report


__all__ = ["ReconcileOutstandingUseCase"]
