"""
Main entry point for RoomBook.
Runs the interactive booking session on the terminal.
"""
from __future__ import annotations

import logging

from roombook.adapters import ConsoleSessionAdapter
from roombook.channels import run_console_session
from roombook.config import get_config

logger = logging.getLogger(__name__)


def main():
    config = get_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.get_log_level(),
    )

    try:
        service = config.create_booking_service()
        adapter = ConsoleSessionAdapter(currency_symbol=config.get_currency_symbol())
        run_console_session(service, adapter, hotel_name=config.get_hotel_display_name())
    except (KeyboardInterrupt, EOFError):
        logger.info("Stopped by user")
    except Exception as e:
        logger.error(f"System Error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
