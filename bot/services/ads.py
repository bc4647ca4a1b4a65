"""
Interstitial ad service
Decides when an interstitial is due and removes short-lived messages on a timer
"""

import logging
import threading
from decimal import Decimal
from typing import Callable, Optional

from telebot import TeleBot

logger = logging.getLogger(__name__)

DEFAULT_EVERY = 20

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]

class InterstitialScheduler:
    """Calls `show` on every N-th positive calculation"""

    def __init__(self, show: Callable[[int], None], every: int = DEFAULT_EVERY):
        if every < 1:
            raise ValueError("every must be a positive integer")
        self._show = show
        self.every = every

    def is_due(self, calculation_count: int) -> bool:
        return calculation_count > 0 and calculation_count % self.every == 0

    def __call__(self, amount: Decimal, calculation_count: int):
        if self.is_due(calculation_count):
            logger.info(f"Showing interstitial ad after {calculation_count} calculations")
            self._show(calculation_count)

class ExpiringMessage:
    """
    A sent message that deletes itself after a delay

    Args:
        bot: TeleBot instance
        chat_id: Chat the message lives in
        message_id: Message to delete
        timeout: Seconds before deletion
        timer_factory: Creates the timer, threading.Timer by default
    """

    def __init__(
        self,
        bot: TeleBot,
        chat_id: int,
        message_id: int,
        timeout: float,
        timer_factory: TimerFactory = threading.Timer,
    ):
        self.bot = bot
        self.chat_id = chat_id
        self.message_id = message_id
        self.closed = False
        self._lock = threading.Lock()

        self._timer: Optional[threading.Timer] = timer_factory(timeout, self.close)
        self._timer.daemon = True
        self._timer.start()

    def close(self) -> bool:
        """Delete the message now; returns False if it was already closed"""
        with self._lock:
            if self.closed:
                return False
            self.closed = True

        try:
            self.bot.delete_message(self.chat_id, self.message_id)
        except Exception as e:
            logger.error(f"Failed to delete message {self.message_id} in chat {self.chat_id}: {e}")
        return True

    def cancel(self):
        """Stop the pending deletion, keeping the message"""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
