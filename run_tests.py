#!/usr/bin/env python3
"""
Test runner for the Pago Móvil bot unit tests
"""

import sys
import os
import unittest

# Modules import each other relative to the bot directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'bot'))

# Handlers need a token to import config, tests never reach Telegram
os.environ.setdefault("BOT_TOKEN", "123456:TEST")

if __name__ == '__main__':
    loader = unittest.TestLoader()
    suite = loader.discover('tests', pattern='test_*.py')

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    sys.exit(0 if result.wasSuccessful() else 1)
