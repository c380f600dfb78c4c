"""
Result Formatter: display-only projection of a CalculationResult.

Converts CAD amounts to the selected currency with the static FX rate and
renders strings. Never touches the underlying result values.
"""

from typing import Optional

from .schemas import CalculationResult, Currency, FormattedResult

NOT_APPLICABLE = "n/a"
ROI_NOT_APPLICABLE = "n/a (no incidents)"

CURRENCY_SYMBOLS = {
    "CAD": "C$",
    "USD": "$",
}


def _code(currency) -> str:
    return getattr(currency, "value", currency)


def convert_amount(value_cad: float, currency, fx_rate: float) -> float:
    """CAD → selected currency. CAD passes through unchanged."""
    if _code(currency) == "USD":
        return value_cad * fx_rate
    return value_cad


def _with_symbol(text: str, negative: bool, currency) -> str:
    sign = "-" if negative else ""
    return f"{sign}{CURRENCY_SYMBOLS[_code(currency)]}{text}"


def format_currency(value_cad: float, currency, fx_rate: float) -> str:
    """Whole units with thousands separators, e.g. C$1,234,568."""
    amount = convert_amount(value_cad, currency, fx_rate)
    text = f"{abs(amount):,.0f}"
    return _with_symbol(text, amount < 0 and text != "0", currency)


def format_unit_cost(value_cad: Optional[float], currency, fx_rate: float) -> str:
    """Two decimals, e.g. $0.36. 'n/a' when the unit cost is undefined."""
    if value_cad is None:
        return NOT_APPLICABLE
    amount = convert_amount(value_cad, currency, fx_rate)
    text = f"{abs(amount):,.2f}"
    return _with_symbol(text, amount < 0 and text != "0.00", currency)


def format_roi(roi: Optional[float]) -> str:
    if roi is None:
        return ROI_NOT_APPLICABLE
    return f"{roi:.2f}x"


class ResultFormatter:
    """Builds the FormattedResult for one currency/FX pairing."""

    def __init__(self, currency=Currency.CAD, fx_rate: float = 0.73):
        self.currency = Currency(_code(currency))
        self.fx_rate = fx_rate

    def money(self, value_cad: float) -> str:
        return format_currency(value_cad, self.currency, self.fx_rate)

    def build(self, result: CalculationResult) -> FormattedResult:
        interval = result.resurfacing_interval_years
        return FormattedResult(
            currency=self.currency,
            fx_rate=self.fx_rate,
            unit_cost_per_sq_ft=format_unit_cost(result.unit_cost_per_sq_ft, self.currency, self.fx_rate),
            total_material_cost=self.money(result.total_material_cost),
            freight_cost=self.money(result.freight_cost),
            freight_destination=result.freight_destination,
            total_investment=self.money(result.total_investment),
            downtime_loss_per_event=self.money(result.downtime_loss_per_event),
            roi=format_roi(result.roi),
            resurfacing_interval=f"{interval:g} years",
            resurfacing_events=str(result.number_of_resurfacing_events),
            total_resurfacing_cost=self.money(result.total_resurfacing_cost),
            total_downtime_cost=self.money(result.total_downtime_cost),
            lifetime_savings=self.money(result.lifetime_savings),
            annualized_savings=self.money(result.annualized_savings),
        )
