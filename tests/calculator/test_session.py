"""Tests for the calculator session state machine."""

import pytest

from tapecalc.calculator.session import (
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
from tapecalc.measure.arithmetic import Operation
from tapecalc.measure.types import DisplayFormat, DisplayOptions, Measurement, TapePrecision


def type_text(session: CalculatorSession, text: str) -> CalculatorSession:
    for key in text:
        session = press_key(session, key)
    return session


def run(session: CalculatorSession, *steps: str) -> CalculatorSession:
    """Drive a session: operator names, "=" for equals, anything else is typed."""
    for step in steps:
        if step == "=":
            session = press_equals(session)
        elif step in {op.value for op in Operation}:
            session = press_operator(session, step)
        else:
            session = type_text(session, step)
    return session


@pytest.fixture
def session():
    return new_session()


class TestNewSession:
    def test_starts_idle(self, session):
        assert session.phase is CalculatorPhase.IDLE
        assert session.entry == ""
        assert session.display == '0"'
        assert session.screen == '0"'
        assert session.accumulator is None
        assert session.pending is None

    def test_uses_configured_defaults(self, session):
        assert session.precision is TapePrecision.SIXTEENTH
        assert session.options == DisplayOptions()

    def test_overrides(self):
        options = DisplayOptions(show_feet=True)
        s = new_session(precision=32, options=options)
        assert s.precision is TapePrecision.THIRTY_SECOND
        assert s.options is options

    @pytest.mark.parametrize("precision", [0, 10])
    def test_rejects_unsupported_precision(self, precision):
        with pytest.raises(ValueError, match="precision must be one of"):
            new_session(precision=precision)

    def test_is_frozen(self, session):
        with pytest.raises(AttributeError):
            session.entry = "5"  # type: ignore[misc]


class TestEntry:
    def test_typing_builds_entry(self, session):
        s = type_text(session, '5 1/2"')
        assert s.phase is CalculatorPhase.OPERAND_ENTERED
        assert s.entry == '5 1/2"'
        assert s.screen == '5 1/2"'

    def test_rejects_unsupported_key(self, session):
        with pytest.raises(ValueError, match="Unsupported key"):
            press_key(session, "x")

    def test_backspace(self, session):
        s = backspace(type_text(session, "12"))
        assert s.entry == "1"
        assert s.phase is CalculatorPhase.OPERAND_ENTERED

    def test_backspace_to_empty_returns_to_idle(self, session):
        s = backspace(type_text(session, "1"))
        assert s.entry == ""
        assert s.phase is CalculatorPhase.IDLE

    def test_backspace_to_empty_keeps_pending_operator(self, session):
        s = backspace(run(session, "5", "add", "3"))
        assert s.phase is CalculatorPhase.OPERATOR_PENDING
        assert s.pending is Operation.ADD

    def test_backspace_without_entry_is_noop(self, session):
        assert backspace(session) is session

    def test_typing_after_result_starts_fresh(self, session):
        s = run(session, "5", "add", "3", "=", "2")
        assert s.entry == "2"
        assert s.phase is CalculatorPhase.OPERAND_ENTERED


class TestOperations:
    def test_add(self, session):
        s = run(session, '5 1/2"', "add", '3"', "=")
        assert s.phase is CalculatorPhase.RESULT_SHOWN
        assert s.display == '8 1/2"'
        assert s.accumulator == Measurement(8, 1, 2)
        assert s.pending is None

    def test_operator_waits_for_operand(self, session):
        s = run(session, "5", "multiply")
        assert s.phase is CalculatorPhase.OPERATOR_PENDING
        assert s.pending is Operation.MULTIPLY
        assert s.accumulator == Measurement(5)
        assert s.display == '5"'

    def test_chained_operators_evaluate_left_to_right(self, session):
        s = run(session, "5", "add", "3", "subtract")
        assert s.display == '8"'
        assert s.pending is Operation.SUBTRACT
        s = run(s, "2", "=")
        assert s.display == '6"'

    def test_second_operator_replaces_first(self, session):
        s = run(session, "5", "add", "subtract", "2", "=")
        assert s.display == '3"'

    def test_equals_right_after_operator_reuses_left_operand(self, session):
        assert run(session, "5", "add", "=").display == '10"'

    def test_continue_from_result(self, session):
        s = run(session, "5", "add", "3", "=", "divide", "2", "=")
        assert s.display == '4"'

    def test_new_entry_after_result_replaces_it(self, session):
        s = run(session, "5", "add", "3", "=", "2", "add", "1", "=")
        assert s.display == '3"'

    def test_negative_result(self, session):
        s = run(session, "2", "subtract", "5", "=")
        assert s.display == '-3"'
        s = run(s, "add", "1", "=")
        assert s.display == '-2"'

    def test_result_rounded_to_precision(self, session):
        s = run(session, "10", "divide", "3", "=")
        assert s.display == '3 5/16"'

    def test_feet_entry_and_display(self):
        s = new_session(options=DisplayOptions(show_feet=True))
        s = run(s, "5'", "add", '3"', "=")
        assert s.display == "5' 3\""

    def test_unparsable_entry_is_ignored(self, session):
        s = type_text(session, "5/")
        assert press_operator(s, "add") is s
        assert press_equals(s) is s

    def test_equals_with_nothing_entered_is_noop(self, session):
        assert press_equals(session) is session


class TestEqualsWithoutOperator:
    def test_rounds_entry_to_precision(self, session):
        assert run(session, "5.06", "=").display == '5 1/16"'
        assert run(session, "5.03", "=").display == '5"'

    def test_reformats_entry(self, session):
        s = run(session, '5 8/16"', "=")
        assert s.display == '5 1/2"'
        assert s.phase is CalculatorPhase.RESULT_SHOWN


class TestDivideByZero:
    def test_equals_enters_error_phase(self, session):
        s = run(session, "5", "divide", "0", "=")
        assert s.phase is CalculatorPhase.ERROR
        assert s.display == ERROR_DISPLAY
        assert s.accumulator is None
        assert s.pending is None
        assert s.entry == ""

    def test_chained_operator_enters_error_phase(self, session):
        s = run(session, "5", "divide", "0", "add")
        assert s.phase is CalculatorPhase.ERROR

    def test_operator_after_error_is_ignored(self, session):
        s = run(session, "5", "divide", "0", "=")
        assert press_operator(s, "add") is s

    def test_typing_recovers(self, session):
        s = run(session, "5", "divide", "0", "=", "3", "add", "4", "=")
        assert s.display == '7"'


class TestOutOfRange:
    def test_huge_entry_enters_error_phase(self, session):
        s = run(session, "1" * 400, "=")
        assert s.phase is CalculatorPhase.ERROR
        assert s.display == ERROR_DISPLAY

    def test_overflowing_product_enters_error_phase(self, session):
        s = run(session, "1" * 200, "multiply", "1" * 200, "=")
        assert s.phase is CalculatorPhase.ERROR

    def test_unrepresentable_decimal_entry_is_ignored(self, session):
        s = type_text(session, "1" * 400 + ".5")
        assert press_equals(s) is s

    def test_entry_beyond_int_digit_limit_is_ignored(self, session):
        s = type_text(session, "1" * 5000)
        assert press_equals(s) is s


class TestSettingsChanges:
    def test_set_precision(self, session):
        s = set_precision(session, 8)
        assert s.precision is TapePrecision.EIGHTH
        assert run(s, "10", "divide", "3", "=").display == '3 3/8"'

    def test_set_precision_rejects_unsupported(self, session):
        with pytest.raises(ValueError, match="precision must be one of"):
            set_precision(session, 7)

    def test_toggle_display_format(self, session):
        s = toggle_display_format(run(session, '5 1/2"', "add", '3"', "="))
        assert s.options.format is DisplayFormat.SIXTEENTHS
        assert s.display == '8 8/16"'
        s = toggle_display_format(s)
        assert s.options.format is DisplayFormat.REDUCED
        assert s.display == '8 1/2"'

    def test_toggle_twice_restores_finer_fraction(self, session):
        s = run(set_precision(session, 32), '5 1/32"', "add", "0", "=")
        assert s.display == '5 1/32"'
        s = toggle_display_format(s)
        assert s.display == '5 1/16"'
        s = toggle_display_format(s)
        assert s.display == '5 1/32"'
        assert s.accumulator == Measurement(5, 1, 32)

    def test_toggle_keeps_error_display(self, session):
        s = toggle_display_format(run(session, "5", "divide", "0", "="))
        assert s.display == ERROR_DISPLAY

    def test_clear_keeps_precision_and_options(self, session):
        s = toggle_display_format(set_precision(session, 32))
        s = clear(run(s, "5", "add", "3"))
        assert s.phase is CalculatorPhase.IDLE
        assert s.display == '0"'
        assert s.entry == ""
        assert s.precision is TapePrecision.THIRTY_SECOND
        assert s.options.format is DisplayFormat.SIXTEENTHS
