"""
Logging configuration for the bot and CLI.
"""

import logging
import logging.handlers
import os

# Log levels configuration for different environments
LOG_LEVELS = {
    "production": {
        "default": logging.INFO,
        "aiogram": logging.WARNING,
        "aiohttp": logging.WARNING,
        "asyncio": logging.ERROR,
        "PIL": logging.WARNING,
    },
    "development": {
        "default": logging.DEBUG,
        "aiogram": logging.INFO,
        "aiohttp": logging.WARNING,
        "asyncio": logging.WARNING,
        "PIL": logging.WARNING,
    },
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Flag to track if logging has already been configured
_logging_configured = False


def configure_logging(environment="development", log_dir="logs", to_files=True):
    """
    Configures application logging.

    Args:
        environment: "production" or "development"
        log_dir: Directory for log files
        to_files: Also write rotating log files
    """
    global _logging_configured

    # Only configure logging once - prevent duplicate handlers
    if _logging_configured:
        logging.getLogger("komparisi").debug("Logging already configured - skipping")
        return

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    levels = LOG_LEVELS.get(environment, LOG_LEVELS["development"])
    root_logger.setLevel(levels["default"])

    console = logging.StreamHandler()
    if environment == "development":
        console.setLevel(logging.DEBUG)
        console.setFormatter(logging.Formatter(
            "\033[1;36m%(asctime)s\033[0m - \033[1;33m%(name)s\033[0m - \033[1;35m%(levelname)s\033[0m - %(message)s"
        ))
    else:
        console.setLevel(levels["default"])
        console.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console)

    if to_files:
        os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            f"{log_dir}/komparisi.log",
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5
        )
        file_handler.setLevel(levels["default"])
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

        # Separate file for errors
        error_handler = logging.handlers.RotatingFileHandler(
            f"{log_dir}/errors.log",
            maxBytes=5*1024*1024,  # 5 MB
            backupCount=3
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(error_handler)

    for module, level in levels.items():
        if module != "default":
            logging.getLogger(module).setLevel(level)

    logging.getLogger("komparisi").info(
        f"Logging configured for {environment} environment with {len(root_logger.handlers)} handlers"
    )
    _logging_configured = True
