"""Calculator form state."""

import logging
from dataclasses import dataclass

from .currency import normalize_input, parse_amount
from .installment import MONTH_NAMES, InstallmentPlan

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """What the user has entered into the calculator form.

    Only the display text of the money fields is stored; their numeric
    values are parsed from it on access, so the two can never disagree.
    `initial_month` is the month captured when the page was first opened
    and is what reset() goes back to.
    """

    initial_month: int
    start_month: int
    principal_text: str = ""
    down_payment_text: str = ""

    @classmethod
    def at_mount(cls, current_month: int) -> "CalculatorState":
        """Fresh state for a page opened during `current_month` (0-11)."""
        _check_month(current_month)
        return cls(initial_month=current_month, start_month=current_month)

    @property
    def principal_value(self) -> int:
        return parse_amount(self.principal_text)

    @property
    def down_payment_value(self) -> int:
        return parse_amount(self.down_payment_text)

    @property
    def plan(self) -> InstallmentPlan:
        return InstallmentPlan(
            principal=self.principal_value,
            down_payment=self.down_payment_value,
            start_month=self.start_month,
        )

    def set_principal_text(self, raw: str) -> None:
        self.principal_text = normalize_input(raw)

    def set_down_payment_text(self, raw: str) -> None:
        self.down_payment_text = normalize_input(raw)

    def select_start_month(self, month: int) -> None:
        _check_month(month)
        logger.debug("Start month changed to %s", MONTH_NAMES[month])
        self.start_month = month

    def reset(self) -> None:
        """Clear both money fields and go back to the mount-time month."""
        logger.debug("Resetting calculator to %s", MONTH_NAMES[self.initial_month])
        self.principal_text = ""
        self.down_payment_text = ""
        self.start_month = self.initial_month


def _check_month(month: int) -> None:
    if not 0 <= month < len(MONTH_NAMES):
        raise ValueError(f"Month index must be between 0 and 11, got {month}")
