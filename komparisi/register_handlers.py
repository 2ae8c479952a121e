"""
Helper module for registering all handlers with the dispatcher.
"""

from aiogram import Dispatcher

from komparisi.handlers.ktp_handler import router as ktp_router


def register_handlers(dp: Dispatcher):
    """
    Registers all handlers with the dispatcher.

    Args:
        dp: Aiogram dispatcher
    """
    # Initialize set for tracking registered routers if not exists
    if not hasattr(dp, "_registered_routers"):
        dp._registered_routers = set()

    if "ktp_router" not in dp._registered_routers:
        dp.include_router(ktp_router)
        dp._registered_routers.add("ktp_router")
