from aiogram.fsm.state import State, StatesGroup


class KtpStates(StatesGroup):
    collecting = State()  # images are being queued
    processing = State()  # batch extraction running
