"""Fixed-margin installment plan calculations."""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

MARGIN_RATE = 0.35  # seller margin on the product price
TERM_MONTHS = 10

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


@dataclass
class ScheduleRow:
    """One installment period."""

    month_label: str
    amount: float
    balance: float  # may go negative after payoff

    @property
    def display_balance(self) -> float:
        """Balance as shown to the user, never below zero."""
        return max(0.0, self.balance)


@dataclass
class InstallmentPlan:
    """A product financed over TERM_MONTHS with a fixed margin."""

    principal: float
    down_payment: float = 0.0
    start_month: int = 0  # zero-based, 0 = January

    @property
    def margin_amount(self) -> float:
        """Seller margin on the principal."""
        return margin_amount(self.principal)

    @property
    def total_payable(self) -> float:
        """Principal plus margin, less the down payment."""
        return total_payable(self.principal, self.down_payment)

    @property
    def grand_total(self) -> float:
        """Total shown to the customer: principal + margin - down payment."""
        return self.principal + self.margin_amount - self.down_payment

    @property
    def monthly_installment(self) -> float:
        """Amount due each period."""
        return monthly_installment(self.principal, self.down_payment)

    @property
    def has_schedule(self) -> bool:
        """Only a positive price produces a schedule worth showing."""
        return self.principal > 0

    def schedule(self) -> List[ScheduleRow]:
        return build_schedule(self.principal, self.down_payment, self.start_month)


def margin_amount(principal: float) -> float:
    """Margin earned on a principal at MARGIN_RATE."""
    return principal * MARGIN_RATE


def total_payable(principal: float, down_payment: float) -> float:
    """Amount left to pay in installments after the down payment."""
    return principal * (1 + MARGIN_RATE) - down_payment


def monthly_installment(principal: float, down_payment: float) -> float:
    """Equal payment per period covering the total payable."""
    return total_payable(principal, down_payment) / TERM_MONTHS


def month_label(start_month: int, offset: int) -> str:
    """Name of the month `offset` periods after `start_month`, wrapping at December."""
    return MONTH_NAMES[(start_month + offset) % 12]


def build_schedule(
    principal: float,
    down_payment: float,
    start_month: int,
) -> List[ScheduleRow]:
    """Generate the installment schedule.

    Each balance is computed from the closed form

        B_i = P + margin - DP - installment * (i + 1)

    rather than by subtracting payments one after another. Balances are
    left unclamped; see ScheduleRow.display_balance.
    """
    installment = monthly_installment(principal, down_payment)
    financed = principal + margin_amount(principal) - down_payment

    periods = np.arange(1, TERM_MONTHS + 1)
    balances = financed - installment * periods

    logger.debug(
        "Built %d-month schedule: principal=%s down_payment=%s start_month=%s",
        TERM_MONTHS, principal, down_payment, start_month,
    )

    return [
        ScheduleRow(
            month_label=month_label(start_month, i),
            amount=installment,
            balance=float(balance),
        )
        for i, balance in enumerate(balances)
    ]


def schedule_to_dataframe(rows: List[ScheduleRow]) -> pd.DataFrame:
    """Tabulate a schedule.

    Returns DataFrame with columns:
    - period: payment number (1-indexed)
    - month: month name
    - amount: installment amount
    - balance: remaining balance after payment, clamped at zero
    """
    return pd.DataFrame(
        [
            {
                'period': period,
                'month': row.month_label,
                'amount': row.amount,
                'balance': row.display_balance,
            }
            for period, row in enumerate(rows, start=1)
        ],
        columns=['period', 'month', 'amount', 'balance'],
    )
