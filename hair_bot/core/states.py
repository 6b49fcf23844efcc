from aiogram.fsm.state import State, StatesGroup


class AccessCodeStates(StatesGroup):
    waiting_for_code = State()
