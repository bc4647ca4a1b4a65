"""
Bot assembly
Builds the TeleBot instance and wires the handler modules into it
"""

import logging
from telebot import TeleBot

from config import BOT_TOKEN

logger = logging.getLogger(__name__)

# Edits re-run the calculation, so they have to be polled too
ALLOWED_UPDATES = ["message", "edited_message", "callback_query"]

def create_bot(token: str = BOT_TOKEN) -> TeleBot:
    """Create the bot with every handler registered"""
    bot = TeleBot(token, parse_mode="HTML")

    from handlers import start, calculator

    # Commands first, the calculator catches all remaining text
    start.init_bot(bot)
    calculator.init_bot(bot)

    logger.info("Handlers registered")
    return bot
