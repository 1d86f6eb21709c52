"""
Calculator session: the state machine behind a tape-measure calculator keypad.

A CalculatorSession is frozen. Every key handler takes a session and returns
a new one, so a front end only has to hold the latest value. The phase field
is an explicit tag for where the user is in an expression:

    IDLE              nothing entered since start or clear
    OPERAND_ENTERED   the user is typing a measurement
    OPERATOR_PENDING  an operator was pressed; waiting for the right operand
    RESULT_SHOWN      equals was pressed and a result is displayed
    ERROR             the last evaluation failed (divide by zero, or a
                      value too large to represent)

Unparsable entries are ignored: the handler returns the session unchanged and
the front end keeps showing what the user typed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from tapecalc.config import get_settings
from tapecalc.measure import (
    DisplayFormat,
    DisplayOptions,
    Measurement,
    Operation,
    TapePrecision,
    coerce_precision,
    format_imperial_measurement,
    parse_input,
    perform_operation,
    to_decimal_inches,
    to_imperial_measurement,
)

logger = logging.getLogger(__name__)

ERROR_DISPLAY: str = "Error"
ENTRY_KEYS: frozenset[str] = frozenset("0123456789/'\". ")


class CalculatorPhase(str, Enum):
    """Where the session is in entering an expression."""

    IDLE = "idle"
    OPERAND_ENTERED = "operand_entered"
    OPERATOR_PENDING = "operator_pending"
    RESULT_SHOWN = "result_shown"
    ERROR = "error"


@dataclass(frozen=True)
class CalculatorSession:
    """
    Immutable calculator state.

    Attributes:
        phase: Current state-machine phase.
        entry: Text typed for the operand being entered.
        display: Formatted last value (or "Error").
        accumulator: Left operand, or the last result.
        pending: Operator waiting for its right operand.
        precision: Tape graduation results are rounded to.
        options: Display options used to format results.
    """

    phase: CalculatorPhase = CalculatorPhase.IDLE
    entry: str = ""
    display: str = '0"'
    accumulator: Measurement | None = None
    pending: Operation | None = None
    precision: TapePrecision = TapePrecision.SIXTEENTH
    options: DisplayOptions = field(default_factory=DisplayOptions)

    @property
    def screen(self) -> str:
        """Text a front end should show: the entry being typed, else the display."""
        return self.entry or self.display


def new_session(
    precision: int | None = None,
    options: DisplayOptions | None = None,
) -> CalculatorSession:
    """Start a session using configured defaults for anything not given."""
    settings = get_settings()
    return CalculatorSession(
        precision=coerce_precision(precision if precision is not None else settings.precision),
        options=options or settings.display,
    )


def _format(session: CalculatorSession, value: Measurement) -> str:
    return format_imperial_measurement(value, session.options)


def _operand(session: CalculatorSession) -> Measurement | None:
    """The value the next operator or equals acts on."""
    if session.entry:
        return parse_input(session.entry, session.precision)
    if session.accumulator is not None:
        return session.accumulator
    return parse_input(session.display, session.precision)


def _error(session: CalculatorSession, exc: Exception) -> CalculatorSession:
    logger.warning("Calculation failed: %s", exc)
    return replace(
        session,
        phase=CalculatorPhase.ERROR,
        entry="",
        display=ERROR_DISPLAY,
        accumulator=None,
        pending=None,
    )


def press_key(session: CalculatorSession, key: str) -> CalculatorSession:
    """
    Append a digit or notation symbol to the entry.

    After an operator, a result, or an error the key starts a fresh entry.

    Raises:
        ValueError: If key is not a digit or one of / ' " . and space.
    """
    if key not in ENTRY_KEYS:
        raise ValueError(f"Unsupported key {key!r}")
    if session.phase in (CalculatorPhase.IDLE, CalculatorPhase.OPERAND_ENTERED):
        entry = session.entry + key
    else:
        entry = key
    return replace(session, phase=CalculatorPhase.OPERAND_ENTERED, entry=entry)


def backspace(session: CalculatorSession) -> CalculatorSession:
    """Delete the last character of the entry."""
    if session.phase is not CalculatorPhase.OPERAND_ENTERED or not session.entry:
        return session
    entry = session.entry[:-1]
    if entry:
        phase = CalculatorPhase.OPERAND_ENTERED
    elif session.pending is not None:
        phase = CalculatorPhase.OPERATOR_PENDING
    else:
        phase = CalculatorPhase.IDLE
    return replace(session, phase=phase, entry=entry)


def clear(session: CalculatorSession) -> CalculatorSession:
    """Reset to IDLE, keeping the precision and display options."""
    return CalculatorSession(precision=session.precision, options=session.options)


def press_operator(session: CalculatorSession, op: Operation | str) -> CalculatorSession:
    """
    Press an operator key.

    Pressing an operator right after another one replaces it. If an operation
    is already pending and a right operand has been typed, it is evaluated
    first, so ``5 + 3 -`` shows 8 and waits for the next operand.
    """
    operation = Operation(op)
    if session.phase is CalculatorPhase.OPERATOR_PENDING:
        return replace(session, pending=operation)

    operand = _operand(session)
    if operand is None:
        return session

    result = operand
    if session.pending is not None and session.accumulator is not None:
        try:
            result = perform_operation(
                session.accumulator, operand, session.pending, session.precision
            )
        except ArithmeticError as exc:
            return _error(session, exc)

    return replace(
        session,
        phase=CalculatorPhase.OPERATOR_PENDING,
        entry="",
        display=_format(session, result),
        accumulator=result,
        pending=operation,
    )


def press_equals(session: CalculatorSession) -> CalculatorSession:
    """
    Evaluate the pending operation.

    Without a pending operation the typed entry is rounded to the session
    precision and shown. Pressing equals straight after an operator uses the
    left operand again, so ``5 + =`` gives 10.
    """
    if session.pending is None:
        if not session.entry:
            return session
        parsed = parse_input(session.entry, session.precision)
        if parsed is None:
            return session
        try:
            result = to_imperial_measurement(to_decimal_inches(parsed), session.precision)
        except ArithmeticError as exc:
            return _error(session, exc)
    else:
        operand = _operand(session)
        if operand is None or session.accumulator is None:
            return session
        try:
            result = perform_operation(
                session.accumulator, operand, session.pending, session.precision
            )
        except ArithmeticError as exc:
            return _error(session, exc)

    return replace(
        session,
        phase=CalculatorPhase.RESULT_SHOWN,
        entry="",
        display=_format(session, result),
        accumulator=result,
        pending=None,
    )


def set_precision(session: CalculatorSession, precision: int) -> CalculatorSession:
    """Change the graduation used for subsequent results."""
    return replace(session, precision=coerce_precision(precision))


def toggle_display_format(session: CalculatorSession) -> CalculatorSession:
    """
    Switch between reduced fractions and sixteenths, re-rendering the display.

    The display is rendered from the stored value, so toggling twice restores
    the exact text even when sixteenths rounded a finer fraction.
    """
    if session.options.format is DisplayFormat.REDUCED:
        new_format = DisplayFormat.SIXTEENTHS
    else:
        new_format = DisplayFormat.REDUCED
    options = replace(session.options, format=new_format)

    display = session.display
    if session.accumulator is not None:
        display = format_imperial_measurement(session.accumulator, options)
    elif session.phase is not CalculatorPhase.ERROR:
        parsed = parse_input(display, session.precision)
        if parsed is not None:
            display = format_imperial_measurement(parsed, options)
    return replace(session, options=options, display=display)
