"""
Start handler module
Handles /start and /help commands and the install prompt
"""

from telebot import TeleBot
from telebot.types import Message, InlineKeyboardMarkup, InlineKeyboardButton
import logging

from config import APP_URL, INSTALL_PROMPT_TIMEOUT
from services.ads import ExpiringMessage
from sessions import sessions

logger = logging.getLogger(__name__)

WELCOME_TEXT = """👋 <b>Calculadora Pago Móvil</b>

Envíame un monto y te digo la comisión (0,30%) y el total a pagar.
Por ejemplo: <code>27000</code>

Si editas tu mensaje, recalculo el resultado.
/reset reinicia la calculadora."""

# Get bot instance from main module
bot: TeleBot = None

def init_bot(bot_instance: TeleBot):
    """Initialize bot instance"""
    global bot
    bot = bot_instance
    register_handlers()

def register_handlers():
    """Register all handlers for this module"""
    bot.message_handler(commands=['start'])(handle_start)
    bot.message_handler(commands=['help'])(handle_help)

def handle_start(message: Message):
    """Handle /start command"""
    bot.reply_to(message, WELCOME_TEXT)
    offer_install(message)

def handle_help(message: Message):
    """Handle /help command"""
    bot.reply_to(message, WELCOME_TEXT)

def offer_install(message: Message):
    """Show the install button once per session, it disappears after a timeout"""
    if not APP_URL:
        return

    session = sessions.get(message.from_user.id, message.chat.id)
    if session.install_prompt_shown:
        return

    keyboard = InlineKeyboardMarkup(row_width=1)
    keyboard.add(InlineKeyboardButton("📲 Instalar App", url=APP_URL))

    try:
        sent = bot.send_message(
            message.chat.id,
            "¿Quieres tener la calculadora siempre a mano?",
            reply_markup=keyboard
        )
    except Exception as e:
        logger.error(f"Failed to show install prompt in chat {message.chat.id}: {e}")
        return

    session.install_prompt_shown = True
    ExpiringMessage(bot, message.chat.id, sent.message_id, INSTALL_PROMPT_TIMEOUT)
