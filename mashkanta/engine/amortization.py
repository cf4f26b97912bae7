"""Monthly payment and amortization schedule for a single track.

Pure functions: Decimal in, dataclass out. No I/O. Values are left
unrounded; display code formats them.
"""

from decimal import Decimal

from mashkanta.config import settings
from mashkanta.models.results import AmortizationRow


def _check_inputs(principal: Decimal, annual_rate: Decimal, years: int) -> None:
    if principal < 0:
        raise ValueError(f"Principal must not be negative, got {principal}")
    if annual_rate < 0:
        raise ValueError(f"Interest rate must not be negative, got {annual_rate}")
    if years <= 0:
        raise ValueError(f"Term must be a positive number of years, got {years}")


def monthly_payment(principal: Decimal, annual_rate: Decimal, years: int) -> Decimal:
    """Fixed monthly installment that pays off `principal` in `years * 12` months.

    annual_rate is a percent (Decimal("4.5") for 4.5%), compounded monthly.
    """
    _check_inputs(principal, annual_rate, years)
    n = years * 12
    if annual_rate == 0:
        return principal / n

    r = annual_rate / 100 / 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * (r * factor) / (factor - 1)


def amortization_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    years: int,
    tolerance: Decimal | None = None,
) -> list[AmortizationRow]:
    """Month-by-month ledger for one track.

    Emits at most `years * 12` rows and stops after the first row whose
    closing balance is within `tolerance` of zero, so floating residue never
    produces a phantom extra month.
    """
    pmt = monthly_payment(principal, annual_rate, years)
    r = annual_rate / 100 / 12
    tol = settings.balance_tolerance if tolerance is None else tolerance

    rows: list[AmortizationRow] = []
    balance = principal

    for month in range(1, years * 12 + 1):
        interest = balance * r
        principal_paid = pmt - interest
        balance_end = max(Decimal("0"), balance - principal_paid)

        rows.append(AmortizationRow(
            month=month,
            balance_start=balance,
            payment=pmt,
            interest=interest,
            principal=principal_paid,
            balance_end=balance_end,
        ))

        balance = balance_end
        if balance <= tol:
            break

    return rows


def yearly_summary(rows: list[AmortizationRow]) -> list[dict[str, Decimal]]:
    """Aggregate a schedule by loan year.

    Returns list of dicts with keys: year, payment, principal, interest, ending_balance
    """
    yearly: list[dict[str, Decimal]] = []
    year_payment = Decimal("0")
    year_principal = Decimal("0")
    year_interest = Decimal("0")

    for row in rows:
        year_payment += row.payment
        year_principal += row.principal
        year_interest += row.interest

        if row.month % 12 == 0 or row is rows[-1]:
            yearly.append({
                "year": Decimal((row.month - 1) // 12 + 1),
                "payment": year_payment,
                "principal": year_principal,
                "interest": year_interest,
                "ending_balance": row.balance_end,
            })
            year_payment = Decimal("0")
            year_principal = Decimal("0")
            year_interest = Decimal("0")

    return yearly
