"""Per-parameter scoring rules and the maturity band table.

Every measure reduces to a raw percentage, ``numerator * 100 / denominator``,
which is then mapped to a 0-100 score by the measure's target rule:

    HIGHER_IS_BETTER    min(percentage, 100)
    LOWER_IS_BETTER     max(0, 100 - percentage)
    HALF_COVERAGE_FULL  100 once percentage >= 50, linear ramp below

The weighted score is that score scaled by the measure's weightage, so the
weighted scores of a full catalog add up to a 0-100 composite index.

This module has no I/O and no framework imports so that it can be unit-tested
in isolation.
"""

from cci_calculator.core.catalog import TargetRule
from cci_calculator.core.parameters import Parameter

MAX_SCORE: float = 100.0

# Percentage at which a HALF_COVERAGE_FULL measure earns full credit
HALF_COVERAGE_THRESHOLD: float = 50.0

# Maturity bands, scanned in order (inclusive lower bound). First match wins.
#   [91, 100] -> Exceptional
#   [81, 91)  -> Optimal       (81-90.99)
#   [71, 81)  -> Manageable    (71-80.99)
#   [61, 71)  -> Developing    (61-70.99)
#   [51, 61)  -> Bare Minimum  (51-60.99)
#   [0, 51)   -> Fail          (0-50.99)
MATURITY_BANDS: list[tuple[float, str]] = [
    (91.0, "Exceptional"),
    (81.0, "Optimal"),
    (71.0, "Manageable"),
    (61.0, "Developing"),
    (51.0, "Bare Minimum"),
    (0.0, "Fail"),
]

LOWEST_MATURITY_LEVEL: str = MATURITY_BANDS[-1][1]

_FAIL_DESCRIPTION: str = (
    "The organization has scored below the cut-off in at least one domain/sub-domain"
)


def compute_percentage(parameter: Parameter) -> float:
    """Return the raw compliance percentage, unbounded above.

    Callers must check for a zero denominator first.
    """
    return parameter.numerator * 100 / parameter.denominator


def score_parameter(parameter: Parameter) -> float:
    """Compute the normalised 0-100 score for a single parameter.

    Args:
        parameter: Parameter with numerator, denominator and target rule.

    Returns:
        Score in range 0.0-100.0. A zero denominator or a target with no
        scoring rule scores 0.0.
    """
    if parameter.denominator == 0:
        return 0.0

    percentage = compute_percentage(parameter)

    if parameter.target == TargetRule.HIGHER_IS_BETTER:
        return min(percentage, MAX_SCORE)

    if parameter.target == TargetRule.LOWER_IS_BETTER:
        return max(0.0, MAX_SCORE - percentage)

    if parameter.target == TargetRule.HALF_COVERAGE_FULL:
        if percentage >= HALF_COVERAGE_THRESHOLD:
            return MAX_SCORE
        return percentage * MAX_SCORE / HALF_COVERAGE_THRESHOLD

    # Target without a scoring rule, e.g. reassigned after construction
    return 0.0


def weighted_score(parameter: Parameter) -> float:
    """Return the parameter's contribution to the composite, 0 to weightage."""
    return score_parameter(parameter) * parameter.weightage / 100


def score_to_maturity_level(score: float) -> str:
    """Map a 0-100 score to a maturity label using MATURITY_BANDS.

    Scores outside every band (negative or NaN) fall back to the lowest band.

    Args:
        score: Composite or category score.

    Returns:
        Maturity level label, e.g. 'Optimal'.
    """
    for threshold, level in MATURITY_BANDS:
        if score >= threshold:
            return level
    return LOWEST_MATURITY_LEVEL


def maturity_description(level: str) -> str:
    """Return the report sentence for a maturity level."""
    if level == LOWEST_MATURITY_LEVEL:
        return _FAIL_DESCRIPTION
    return f"The organization has achieved {level} Cybersecurity Maturity"
