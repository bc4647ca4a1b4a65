"""
Unit tests for handler registration
Tests that each handler module wires its filters into the bot
"""

import os
import unittest
from unittest.mock import Mock, patch, ANY

os.environ.setdefault("BOT_TOKEN", "123456:TEST")

from app import ALLOWED_UPDATES, create_bot
from handlers import calculator as calc_handlers
from handlers import start as start_handlers
from sessions import SessionStore


def registered_filters(registrar):
    return [c.kwargs for c in registrar.call_args_list]


class TestStartRegistration(unittest.TestCase):
    """Test cases for start handler registration"""

    @patch('handlers.start.bot', None)
    def test_registers_commands(self):
        mock_bot = Mock()

        start_handlers.init_bot(mock_bot)

        mock_bot.message_handler.assert_any_call(commands=['start'])
        mock_bot.message_handler.assert_any_call(commands=['help'])
        mock_bot.message_handler.return_value.assert_any_call(start_handlers.handle_start)
        mock_bot.message_handler.return_value.assert_any_call(start_handlers.handle_help)


class TestCalculatorRegistration(unittest.TestCase):
    """Test cases for calculator handler registration"""

    def setUp(self):
        self.store = SessionStore()
        for target, value in [
            ('handlers.calculator.bot', None),
            ('handlers.calculator.sessions', self.store),
            ('handlers.calculator.AD_TEXT', "Publicidad"),
            ('handlers.calculator.INTERSTITIAL_EVERY', 1),
        ]:
            patcher = patch(target, value)
            patcher.start()
            self.addCleanup(patcher.stop)

        self.mock_bot = Mock()
        calc_handlers.init_bot(self.mock_bot)

    def text_filter(self, registrar):
        for kwargs in registered_filters(registrar):
            if kwargs.get('content_types') == ['text']:
                return kwargs['func']
        self.fail("no text handler registered")

    def test_reset_command(self):
        self.mock_bot.message_handler.assert_any_call(commands=['reset'])
        self.mock_bot.message_handler.return_value.assert_any_call(calc_handlers.handle_reset)

    def test_amount_messages(self):
        func = self.text_filter(self.mock_bot.message_handler)

        self.assertTrue(func(Mock(text="27000")))
        self.assertFalse(func(Mock(text="/start")))
        self.mock_bot.message_handler.return_value.assert_any_call(calc_handlers.handle_amount)

    def test_edited_messages(self):
        self.mock_bot.edited_message_handler.assert_called_once_with(func=ANY, content_types=['text'])
        func = self.text_filter(self.mock_bot.edited_message_handler)

        self.assertTrue(func(Mock(text="1000")))
        self.assertFalse(func(Mock(text="/reset")))
        self.mock_bot.edited_message_handler.return_value.assert_called_once_with(calc_handlers.handle_amount_edit)

    def test_close_interstitial_callback(self):
        self.mock_bot.callback_query_handler.assert_called_once_with(func=ANY)
        func = self.mock_bot.callback_query_handler.call_args.kwargs['func']

        self.assertTrue(func(Mock(data=calc_handlers.CLOSE_INTERSTITIAL)))
        self.assertFalse(func(Mock(data="add_client")))
        self.mock_bot.callback_query_handler.return_value.assert_called_once_with(
            calc_handlers.handle_close_interstitial
        )

    def test_new_session_gets_interstitial_cadence(self):
        session = self.store.get(1, 1)

        _, show_ad = session.calculate("5")

        self.assertTrue(show_ad)


class TestCreateBot(unittest.TestCase):
    """Test cases for bot assembly"""

    @patch('app.TeleBot')
    @patch('handlers.start.bot', None)
    @patch('handlers.calculator.bot', None)
    @patch('handlers.calculator.sessions', new_callable=SessionStore)
    def test_create_bot_wires_both_modules(self, store, mock_telebot):
        bot = create_bot("123:ABC")

        mock_telebot.assert_called_once_with("123:ABC", parse_mode="HTML")
        self.assertIs(bot, mock_telebot.return_value)
        bot.message_handler.assert_any_call(commands=['start'])
        bot.message_handler.assert_any_call(commands=['reset'])
        bot.edited_message_handler.assert_called_once_with(func=ANY, content_types=['text'])
        self.assertIs(start_handlers.bot, bot)
        self.assertIs(calc_handlers.bot, bot)

    def test_edits_are_polled(self):
        self.assertIn("edited_message", ALLOWED_UPDATES)
        self.assertIn("callback_query", ALLOWED_UPDATES)


if __name__ == '__main__':
    unittest.main()
