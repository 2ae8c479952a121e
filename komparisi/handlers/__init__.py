"""
Handlers for the Komparisi Telegram bot.
"""

from komparisi.handlers.ktp_handler import router as ktp_router

__all__ = ["ktp_router"]
