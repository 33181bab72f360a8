"""Sales tax on a purchase, at the state-level rate."""

from typing import Optional

from .brackets import round_cents
from .schemas import TaxTables


def sales_tax_rate(state_code: str, tables: TaxTables) -> Optional[float]:
    """State sales tax rate (percent), or None when unknown."""
    if not state_code:
        return None
    rule = tables.states.get(state_code)
    if rule is None:
        return None
    return rule.sales_tax_rate


def sales_tax(purchase_amount: float, state_code: str, tables: TaxTables) -> float:
    """Sales tax on a purchase, rounded to the cent."""
    if purchase_amount <= 0:
        return 0.0
    rate = sales_tax_rate(state_code, tables)
    if rate is None:
        return 0.0
    return round_cents(purchase_amount * rate / 100)
