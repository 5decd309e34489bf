"""Working parameter records for a single CCI assessment.

The catalog in ``core/catalog.py`` is never mutated. Every assessment starts
from ``new_working_set()``, which clones each definition into an
independently-owned ``Parameter`` with zeroed inputs, and then fills in the
numerator/denominator values supplied by the assessor.
"""

import math
import random
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from cci_calculator.core.catalog import (
    CCI_PARAMETERS,
    ParameterDefinition,
    TargetRule,
)

logger = structlog.get_logger(__name__)

# Auditor comment bands used for demonstration data (inclusive lower bound)
_SAMPLE_COMMENT_BANDS: list[tuple[float, str]] = [
    (90.0, "Excellent implementation. Meets or exceeds all requirements."),
    (70.0, "Good implementation. Minor improvements recommended."),
    (50.0, "Satisfactory implementation. Several areas need attention."),
    (0.0, "Inadequate implementation. Immediate remediation required."),
]


def check_input(name: str, value: float, parameter_id: int) -> None:
    """Reject negative, infinite or NaN numeric inputs.

    Raises:
        ValueError: If ``value`` is not a finite number >= 0.
    """
    if not math.isfinite(value):
        raise ValueError(
            f"{name} must be a finite number, got {value!r} for parameter {parameter_id}"
        )
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value!r} for parameter {parameter_id}")


@dataclass
class Parameter:
    """Mutable scoring record for one measure within an assessment.

    Attributes:
        id: Numeric identifier, unique within an assessment.
        measure_id: CSCRF measure code (may repeat across parameters).
        title: Measure title.
        target: Scoring rule. Plain 0/50/100 values are converted on init.
        weightage: Share of the composite index.
        numerator: Count of compliant items.
        denominator: Count of applicable items. Zero scores as 0.
        framework_category: '<Domain>: <Sub-category>' label, or None.
        self_assessment_score: Last computed 0-100 score (derived, not input).
        evidence: Implementation evidence supplied by the assessor.
        auditor_comments: Free-text auditor commentary.
    """

    id: int
    measure_id: str
    title: str
    target: TargetRule
    weightage: float
    numerator: float = 0
    denominator: float = 1
    framework_category: str | None = None
    self_assessment_score: float = 0.0
    evidence: str = ""
    auditor_comments: str = ""

    def __post_init__(self) -> None:
        """Normalise the target rule and reject negative inputs.

        Raises:
            UnsupportedTargetError: If target is not 0, 50 or 100.
            ValueError: If numerator, denominator or weightage is negative
                or not a finite number.
        """
        if not isinstance(self.target, TargetRule):
            self.target = TargetRule.from_target(self.target)
        check_input("numerator", self.numerator, self.id)
        check_input("denominator", self.denominator, self.id)
        check_input("weightage", self.weightage, self.id)

    @classmethod
    def from_definition(cls, definition: ParameterDefinition) -> "Parameter":
        """Create a fresh working record from a catalog definition."""
        return cls(
            id=definition.id,
            measure_id=definition.measure_id,
            title=definition.title,
            target=definition.target,
            weightage=definition.weightage,
            framework_category=definition.framework_category,
        )


def new_working_set() -> list[Parameter]:
    """Clone the catalog into a new, independently-owned parameter list.

    Returns:
        One Parameter per catalog definition with numerator 0 and
        denominator 1, in catalog order.
    """
    return [Parameter.from_definition(definition) for definition in CCI_PARAMETERS]


def find_duplicate_measure_ids(
    parameters: Sequence[Parameter | ParameterDefinition],
) -> dict[str, list[int]]:
    """Find measure codes shared by more than one parameter.

    Duplicates are kept as distinct parameters; this only reports them.

    Args:
        parameters: Working parameters or catalog definitions to inspect.

    Returns:
        Mapping of duplicated measure code to the parameter ids using it.
    """
    ids_by_code: dict[str, list[int]] = defaultdict(list)
    for parameter in parameters:
        ids_by_code[parameter.measure_id].append(parameter.id)
    return {code: ids for code, ids in ids_by_code.items() if len(ids) > 1}


def _sample_comment(percentage: float) -> str:
    for threshold, comment in _SAMPLE_COMMENT_BANDS:
        if percentage >= threshold:
            return comment
    return _SAMPLE_COMMENT_BANDS[-1][1]


def generate_sample_data(rng: random.Random | None = None) -> list[Parameter]:
    """Build a working set filled with plausible demonstration inputs.

    Denominators are drawn from 1-100. Most measures land at 70-100%
    compliance; lower-is-better measures land at 0-10% so the sample scores
    well across the board.

    Args:
        rng: Random source. Pass a seeded ``random.Random`` for
            reproducible output.

    Returns:
        A new working set with numerator, denominator and auditor comments set.
    """
    rng = rng or random.Random()
    parameters = new_working_set()

    for parameter in parameters:
        denominator = rng.randint(1, 100)
        if parameter.target is TargetRule.LOWER_IS_BETTER:
            success = rng.random() * 0.1
        else:
            success = 0.7 + rng.random() * 0.3

        parameter.numerator = math.floor(denominator * success)
        parameter.denominator = denominator
        parameter.auditor_comments = _sample_comment(
            parameter.numerator / denominator * 100
        )

    logger.debug("Sample assessment data generated", parameter_count=len(parameters))
    return parameters
