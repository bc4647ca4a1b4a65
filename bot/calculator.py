"""
Pago Móvil calculator
Runs one sanitize -> parse -> calculate -> format pass per amount change
and pushes the results into the sinks it was built with
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, List, Optional

from services.commission import commission, format_currency, parse_amount, total

Sink = Callable[[str], None]
CalculationListener = Callable[[Decimal, int], None]

APP_TITLE = "Calculadora Pago Móvil"
IDLE_TITLE = f"{APP_TITLE} - Venezuela"

@dataclass
class ResultsCard:
    """Formatted results of the latest render pass"""
    original: str = ""
    commission: str = ""
    total: str = ""
    title: str = IDLE_TITLE

    def set_original(self, value: str):
        self.original = value

    def set_commission(self, value: str):
        self.commission = value

    def set_total(self, value: str):
        self.total = value

    def set_title(self, value: str):
        self.title = value

    def as_text(self) -> str:
        """HTML message body for Telegram"""
        return f"""🧮 <b>{self.title}</b>

— Monto: {self.original}
— Comisión (0,30%): {self.commission}
— Total a pagar: <b>{self.total}</b>"""

class PagoMovilCalculator:
    """Commission calculator bound to its output sinks"""

    def __init__(
        self,
        original_sink: Sink,
        commission_sink: Sink,
        total_sink: Sink,
        title_sink: Optional[Sink] = None,
    ):
        self._original_sink = original_sink
        self._commission_sink = commission_sink
        self._total_sink = total_sink
        self._title_sink = title_sink
        self._listeners: List[CalculationListener] = []

        self.current_amount: Decimal = Decimal("0")
        # Positive calculations only, drives the interstitial cadence
        self.calculation_count: int = 0

        self.update_results()

    @classmethod
    def for_card(cls, card: ResultsCard) -> "PagoMovilCalculator":
        """Build a calculator that renders into a ResultsCard"""
        return cls(card.set_original, card.set_commission, card.set_total, card.set_title)

    def subscribe(self, listener: CalculationListener):
        """Register a listener called after every positive calculation"""
        self._listeners.append(listener)

    def handle_amount_change(self, value: str) -> Decimal:
        """
        Recalculate for a new raw input value

        Args:
            value: Raw text from the input

        Returns:
            The parsed amount
        """
        amount = parse_amount(value)

        self.current_amount = amount
        self.update_results()

        if amount > 0:
            self.calculation_count += 1
            for listener in self._listeners:
                listener(amount, self.calculation_count)

        return amount

    def update_results(self):
        """Render the current amount into the sinks"""
        fee = commission(self.current_amount)
        total_amount = total(self.current_amount)

        self._original_sink(format_currency(self.current_amount))
        self._commission_sink(format_currency(fee))
        self._total_sink(format_currency(total_amount))

        if self._title_sink is not None:
            if self.current_amount > 0:
                self._title_sink(f"{format_currency(total_amount)} - {APP_TITLE}")
            else:
                self._title_sink(IDLE_TITLE)
