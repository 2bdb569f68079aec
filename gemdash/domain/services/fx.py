"""Currency conversion into the canonical currency (LKR)."""

from decimal import Decimal
from logging import Logger
from types import MappingProxyType

from gemdash.domain.constants import CANONICAL_CURRENCY
from gemdash.domain.services.normalization import normalize_currency


# Default rates used on the receivables side (payment and customer ledgers).
RECEIVABLES_RATES = MappingProxyType(
    {
        "USD": Decimal("300"),
        "THB": Decimal("8.5"),
        "RMB": Decimal("42"),
    }
)

# Default rates offered when recording purchases, expenses and capital.
# They differ from RECEIVABLES_RATES for the same codes (USD 302.50 vs 300);
# both are kept until the business confirms which one is authoritative.
PURCHASE_RATES = MappingProxyType(
    {
        "USD": Decimal("302.50"),
        "TZS": Decimal("0.1251"),
        "KES": Decimal("2.33"),
        "THB": Decimal("8.50"),
        "EUR": Decimal("330.20"),
        "GBP": Decimal("385.80"),
    }
)


def resolve_rate(
    currency,
    rate: Decimal | None = None,
    table=RECEIVABLES_RATES,
    logger: Logger | None = None,
) -> Decimal:
    """Return the multiplier converting a currency into LKR.

    Args:
        currency: Raw or normalized currency code.
        rate: Record-level exchange rate, preferred when positive.
        table: Default rate table for the calling context.
        logger: Optional logger warned about unknown currencies.

    Returns:
        Decimal: Conversion multiplier (1 for the canonical currency).
    """
    code = normalize_currency(currency)
    if code == CANONICAL_CURRENCY:
        return Decimal("1")
    if rate is not None and rate > 0:
        return rate
    default = table.get(code)
    if default is None:
        if logger is not None:
            logger.warning(
                f"No default rate for {code}; amount kept unconverted"
            )
        return Decimal("1")
    return default


def to_canonical(
    amount: Decimal,
    currency,
    rate: Decimal | None = None,
    table=RECEIVABLES_RATES,
    logger: Logger | None = None,
) -> Decimal:
    """Convert an amount into the canonical currency.

    No rounding is applied; formatting is left to the presentation layer.

    Args:
        amount: Amount in the source currency.
        currency: Source currency code; empty means canonical.
        rate: Optional record-level exchange rate.
        table: Default rate table for the calling context.
        logger: Optional logger warned about unknown currencies.

    Returns:
        Decimal: Amount in the canonical currency.
    """
    if normalize_currency(currency) == CANONICAL_CURRENCY:
        return amount
    return amount * resolve_rate(currency, rate, table, logger)


__all__ = [
    "RECEIVABLES_RATES",
    "PURCHASE_RATES",
    "resolve_rate",
    "to_canonical",
]
