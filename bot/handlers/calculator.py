"""
Calculator handler module
Turns amount messages into results cards and shows interstitial ads
"""

from telebot import TeleBot
from telebot.types import Message, InlineKeyboardMarkup, InlineKeyboardButton, CallbackQuery
import logging

from config import AD_TEXT, AD_URL, INTERSTITIAL_EVERY, INTERSTITIAL_TIMEOUT
from services.ads import ExpiringMessage, InterstitialScheduler
from sessions import ChatSession, sessions

logger = logging.getLogger(__name__)

CLOSE_INTERSTITIAL = "close_interstitial"

# Bot instance
bot: TeleBot = None

def init_bot(bot_instance: TeleBot):
    """Initialize bot instance"""
    global bot
    bot = bot_instance
    register_handlers()

def register_handlers():
    """Register all handlers for this module"""
    bot.message_handler(commands=['reset'])(handle_reset)

    # Любой текст, кроме команд, считается вводом суммы
    bot.message_handler(func=lambda message: _is_amount_input(message), content_types=['text'])(handle_amount)
    bot.edited_message_handler(func=lambda message: _is_amount_input(message), content_types=['text'])(handle_amount_edit)

    bot.callback_query_handler(func=lambda call: call.data == CLOSE_INTERSTITIAL)(handle_close_interstitial)

    sessions.on_new_session(attach_interstitial)

def _is_amount_input(message) -> bool:
    return not (message.text or "").startswith("/")

def attach_interstitial(user_id: int, chat_id: int, session: ChatSession):
    """Subscribe the interstitial cadence to a new session's calculator"""
    if not AD_TEXT:
        return

    def mark_due(calculation_count: int):
        session.interstitial_due = True

    session.calculator.subscribe(InterstitialScheduler(mark_due, every=INTERSTITIAL_EVERY))

def handle_amount(message: Message):
    """Recalculate for a new amount message and reply with the results"""
    session = sessions.get(message.from_user.id, message.chat.id)
    results, show_ad = session.calculate(message.text)

    send_results(message, session, results)
    if show_ad:
        show_interstitial(message.chat.id, session)

def handle_amount_edit(message: Message):
    """Recalculate for an edited amount message and edit its results"""
    session = sessions.get(message.from_user.id, message.chat.id)
    results, show_ad = session.calculate(message.text)

    result_id = session.result_for(message.message_id)
    if result_id is None:
        send_results(message, session, results)
    else:
        try:
            bot.edit_message_text(results, message.chat.id, result_id)
        except Exception as e:
            logger.error(f"Failed to update results {result_id} in chat {message.chat.id}: {e}")

    if show_ad:
        show_interstitial(message.chat.id, session)

def send_results(message: Message, session: ChatSession, results: str):
    """Reply to the input message with a results card snapshot"""
    try:
        sent = bot.reply_to(message, results)
    except Exception as e:
        logger.error(f"Failed to send results to chat {message.chat.id}: {e}")
        return
    session.remember_result(message.message_id, sent.message_id)

def show_interstitial(chat_id: int, session: ChatSession):
    """Send the interstitial ad; it closes itself after a timeout"""
    keyboard = InlineKeyboardMarkup(row_width=1)
    if AD_URL:
        keyboard.add(InlineKeyboardButton("🔗 Ver más", url=AD_URL))
    keyboard.add(InlineKeyboardButton("×", callback_data=CLOSE_INTERSTITIAL))

    try:
        sent = bot.send_message(chat_id, AD_TEXT, reply_markup=keyboard)
    except Exception as e:
        logger.error(f"Error loading interstitial ad in chat {chat_id}: {e}")
        return

    with session.lock:
        previous = session.interstitial
        session.interstitial = ExpiringMessage(bot, chat_id, sent.message_id, INTERSTITIAL_TIMEOUT)

    # Only one interstitial per chat at a time
    if previous is not None:
        previous.cancel()
        previous.close()

def handle_close_interstitial(call: CallbackQuery):
    """Handle the × button on an interstitial"""
    bot.answer_callback_query(call.id)

    chat_id = call.message.chat.id
    session = sessions.get(call.from_user.id, chat_id)

    with session.lock:
        interstitial = session.interstitial
        current = interstitial is not None and interstitial.message_id == call.message.message_id
        if current:
            session.interstitial = None

    if current:
        interstitial.cancel()
        interstitial.close()
        return

    # Stale ad from an earlier session
    try:
        bot.delete_message(chat_id, call.message.message_id)
    except Exception as e:
        logger.error(f"Failed to close interstitial {call.message.message_id} in chat {chat_id}: {e}")

def handle_reset(message: Message):
    """Handle /reset command - start over with a fresh calculator"""
    sessions.reset(message.from_user.id, message.chat.id)
    session = sessions.get(message.from_user.id, message.chat.id)

    bot.reply_to(message, "🔄 Calculadora reiniciada")
    send_results(message, session, session.snapshot())
    logger.info(f"User {message.from_user.id} reset the calculator")
