"""
Entry point for the console command session.
"""

import asyncio
import logging
import sys

from bot.config import config
from bot.console import run_console
from utils.logger import get_logger, set_level

logger = get_logger("Main")


def main():
    """Main entry point."""
    if config.DEBUG:
        set_level(logging.DEBUG)

    try:
        logger.info(f"Starting command console (prefix {config.COMMAND_PREFIX!r})...")
        stats = asyncio.run(run_console(config))
        logger.info(stats.format_status())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
