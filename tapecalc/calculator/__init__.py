from .session import (
    ERROR_DISPLAY,
    CalculatorPhase,
    CalculatorSession,
    backspace,
    clear,
    new_session,
    press_equals,
    press_key,
    press_operator,
    set_precision,
    toggle_display_format,
)

__all__ = [
    "ERROR_DISPLAY",
    "CalculatorPhase",
    "CalculatorSession",
    "new_session",
    "press_key",
    "backspace",
    "clear",
    "press_operator",
    "press_equals",
    "set_precision",
    "toggle_display_format",
]
