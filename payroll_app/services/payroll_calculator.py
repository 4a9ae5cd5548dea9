from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")
# largest magnitude a Numeric(12, 2) column holds
MAX_MONEY = Decimal("9999999999.99")

Number = Union[Decimal, int, str]


def to_money(value: Number) -> Decimal:
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PayrollFigures:
    basic_salary: Decimal
    bonus: Decimal
    deductions: Decimal
    tax_percent: Decimal
    tax_amount: Decimal
    net_salary: Decimal


def compute_payroll(
    basic_salary: Number,
    bonus: Number = 0,
    deductions: Number = 0,
    tax_percent: Number = 0,
) -> PayrollFigures:
    """Derive tax and net salary for one payment.

    tax = (basic + bonus) * tax_percent / 100, rounded half-up to cents.
    net = basic + bonus - tax - deductions, exact once inputs are in cents.
    Values are not range-checked.
    """
    basic = to_money(basic_salary)
    bonus_ = to_money(bonus)
    deductions_ = to_money(deductions)
    percent = to_money(tax_percent)

    gross = basic + bonus_
    tax = (gross * percent / Decimal(100)).quantize(CENTS, rounding=ROUND_HALF_UP)
    net = gross - tax - deductions_

    return PayrollFigures(
        basic_salary=basic,
        bonus=bonus_,
        deductions=deductions_,
        tax_percent=percent,
        tax_amount=tax,
        net_salary=net,
    )
