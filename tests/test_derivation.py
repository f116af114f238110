"""Tests for the step-by-step explanations."""

from __future__ import annotations

from rfpower.engine import convert_dbm_to_watts, convert_watts_to_dbm
from rfpower.engine.derivation import (
    DBM_TO_WATTS_FORMULA,
    WATTS_TO_DBM_FORMULA,
    Derivation,
)


class TestDbmToWattsSteps:
    def test_full_text(self) -> None:
        assert convert_dbm_to_watts("20").explanation == (
            "Converting 20 dBm to Watt:\n"
            "\n"
            "Formula: Power (W) = 10^((dBm - 30) / 10)\n"
            "Step 1: Calculate exponent: (20 - 30) ÷ 10 = -1.000\n"
            "Step 2: 10^-1.000 = 0.100000 W\n"
            "\n"
            "Result: Power = 0.100000 W"
        )

    def test_structured_fields(self) -> None:
        derivation = convert_dbm_to_watts("0").derivation
        assert derivation.formula == DBM_TO_WATTS_FORMULA
        assert derivation.title == "Converting 0 dBm to Watt:"
        assert derivation.steps[0].endswith("= -3.000")
        assert derivation.result == "Power = 0.001000 W"

    def test_input_echo_is_shortest_form(self) -> None:
        derivation = convert_dbm_to_watts("1e1").derivation
        assert derivation.title == "Converting 10 dBm to Watt:"
        assert "(10 - 30)" in derivation.steps[0]

    def test_result_matches_display(self) -> None:
        result = convert_dbm_to_watts("13.7")
        assert result.derivation.result == f"Power = {result.display} W"


class TestWattsToDbmSteps:
    def test_full_text(self) -> None:
        assert convert_watts_to_dbm("1").explanation == (
            "Converting 1 W to dBm:\n"
            "\n"
            "Formula: dBm = 10 × log₁₀(Power) + 30\n"
            "Step 1: Calculate log₁₀(1) = 0.000000\n"
            "Step 2: 10 × 0.000000 + 30 = 30.000000\n"
            "\n"
            "Result: dBm = 30.000000"
        )

    def test_formula(self) -> None:
        assert convert_watts_to_dbm("2").derivation.formula == WATTS_TO_DBM_FORMULA

    def test_result_matches_display(self) -> None:
        result = convert_watts_to_dbm("0.0042")
        assert result.derivation.result == f"dBm = {result.display}"


class TestRender:
    def test_no_steps(self) -> None:
        text = Derivation(title="T", formula="F", result="R").render()
        assert text == "T\n\nFormula: F\n\nResult: R"
