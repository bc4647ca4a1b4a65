#!/usr/bin/env python3
"""
Pago Móvil Bot - Main Entry Point
"""

import logging

from app import ALLOWED_UPDATES, create_bot
from config import REPLY_TIMEOUT

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main():
    bot = create_bot()
    logger.info(f"Polling for {', '.join(ALLOWED_UPDATES)}")

    try:
        bot.infinity_polling(timeout=REPLY_TIMEOUT, allowed_updates=ALLOWED_UPDATES)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
    except Exception as e:
        logger.error(f"Bot error: {e}")
        raise

if __name__ == "__main__":
    main()
