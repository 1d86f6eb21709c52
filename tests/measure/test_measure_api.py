"""Tests for the tapecalc.measure public API and exports."""

import tapecalc.measure


class TestPublicAPI:
    def test_all_names_importable(self):
        """Every name in __all__ is actually importable from the package."""
        for name in tapecalc.measure.__all__:
            assert hasattr(tapecalc.measure, name), f"{name!r} in __all__ but not importable"

    def test_all_is_complete(self):
        """__all__ contains every public name defined in the package __init__."""
        import types as builtin_types

        submodules = {
            name
            for name in dir(tapecalc.measure)
            if isinstance(getattr(tapecalc.measure, name), builtin_types.ModuleType)
        }
        public_names = {
            name
            for name in dir(tapecalc.measure)
            if not name.startswith("_") and name not in submodules
        }
        missing = public_names - set(tapecalc.measure.__all__)
        assert not missing, f"Public names missing from __all__: {missing}"

    def test_parse_then_format(self):
        from tapecalc.measure import format_imperial_measurement, parse_input

        assert format_imperial_measurement(parse_input("5' 3 1/2\"")) == '63 1/2"'

    def test_arithmetic_importable(self):
        from tapecalc.measure import Measurement, Operation, perform_operation

        assert perform_operation(Measurement(5), Measurement(5), Operation.ADD) == Measurement(10)
