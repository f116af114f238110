"""
Step-by-step explanation of a conversion.

A Derivation only carries strings that were formatted from the numbers the
conversion already computed, so the explanation cannot drift from the
displayed result.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DBM_TO_WATTS_FORMULA = "Power (W) = 10^((dBm - 30) / 10)"
WATTS_TO_DBM_FORMULA = "dBm = 10 × log₁₀(Power) + 30"


@dataclass(frozen=True)
class Derivation:
    """Worked example for one conversion direction."""
    title: str
    formula: str
    steps: tuple[str, ...] = field(default_factory=tuple)
    result: str = ""

    def render(self) -> str:
        """Plain multi-line text, as shown in the calculation-steps box."""
        lines = [self.title, "", f"Formula: {self.formula}"]
        lines += [f"Step {i}: {step}" for i, step in enumerate(self.steps, start=1)]
        lines += ["", f"Result: {self.result}"]
        return "\n".join(lines)


def dbm_to_watts_derivation(dbm_text: str, exponent_text: str, watts_text: str) -> Derivation:
    """Explain dBm → W given the already-formatted input, exponent and result."""
    return Derivation(
        title=f"Converting {dbm_text} dBm to Watt:",
        formula=DBM_TO_WATTS_FORMULA,
        steps=(
            f"Calculate exponent: ({dbm_text} - 30) ÷ 10 = {exponent_text}",
            f"10^{exponent_text} = {watts_text} W",
        ),
        result=f"Power = {watts_text} W",
    )


def watts_to_dbm_derivation(watts_text: str, log_text: str, dbm_text: str) -> Derivation:
    """Explain W → dBm given the already-formatted input, log₁₀ and result."""
    return Derivation(
        title=f"Converting {watts_text} W to dBm:",
        formula=WATTS_TO_DBM_FORMULA,
        steps=(
            f"Calculate log₁₀({watts_text}) = {log_text}",
            f"10 × {log_text} + 30 = {dbm_text}",
        ),
        result=f"dBm = {dbm_text}",
    )
