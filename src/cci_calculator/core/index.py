"""Cyber Capability Index computation.

Combines per-parameter weighted scores into the composite index, classifies
it into a maturity band, and attaches category/domain rollups, the top
improvement areas, and data-quality warnings.

The scorer never mutates its input. It works on a snapshot copy of the
parameter list, so concurrent edits to the caller's records cannot leak into
a computation in flight.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

import structlog

from cci_calculator.core.aggregation import (
    CategoryScore,
    aggregate_by_category,
    roll_up,
)
from cci_calculator.core.parameters import Parameter, find_duplicate_measure_ids
from cci_calculator.core.scoring import (
    MAX_SCORE,
    maturity_description,
    score_parameter,
    score_to_maturity_level,
    weighted_score,
)

logger = structlog.get_logger(__name__)

DEFAULT_ORGANIZATION: str = "Your Organization"
DEFAULT_IMPROVEMENT_AREA_LIMIT: int = 4


@dataclass(frozen=True)
class ImprovementArea:
    """A parameter whose improvement would raise the composite the most.

    Attributes:
        parameter_id: Parameter identifier.
        measure_id: CSCRF measure code.
        title: Measure title.
        score: Current 0-100 score.
        impact: Composite points gained if the parameter reached full score.
    """

    parameter_id: int
    measure_id: str
    title: str
    score: float
    impact: float


@dataclass
class IndexResult:
    """Outcome of one full assessment run.

    Attributes:
        total_score: Sum of all weighted scores, 0-100.
        maturity_level: Band label for total_score.
        maturity_description: Report sentence for the maturity level.
        organization: Assessed organization name.
        assessed_at: UTC timestamp of the computation.
        parameters: Snapshot copies annotated with fresh self_assessment_score.
        category_scores: Sub-category rollup, canonical order.
        domain_scores: Domain rollup, canonical order.
        improvement_areas: Highest-impact improvements, descending impact.
        warnings: Data-quality issues found in the input.
    """

    total_score: float
    maturity_level: str
    maturity_description: str
    organization: str
    assessed_at: datetime
    parameters: list[Parameter] = field(default_factory=list)
    category_scores: dict[str, CategoryScore] = field(default_factory=dict)
    domain_scores: dict[str, CategoryScore] = field(default_factory=dict)
    improvement_areas: list[ImprovementArea] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class CCIScorer:
    """Scoring pipeline for a CCI self-assessment.

    Args:
        improvement_area_limit: Maximum number of improvement areas returned.
    """

    def __init__(self, improvement_area_limit: int = DEFAULT_IMPROVEMENT_AREA_LIMIT) -> None:
        self._improvement_area_limit = improvement_area_limit

    def compute_total(self, parameters: list[Parameter]) -> float:
        """Sum weighted scores. An empty list yields 0.0."""
        return sum((weighted_score(p) for p in parameters), 0.0)

    def improvement_areas(self, parameters: list[Parameter]) -> list[ImprovementArea]:
        """Rank parameters by the composite gain of reaching full score.

        Parameters already at full score are skipped. Ties keep input order.

        Args:
            parameters: Scored parameters.

        Returns:
            At most ``improvement_area_limit`` areas, highest impact first.
        """
        areas: list[ImprovementArea] = []
        for parameter in parameters:
            score = score_parameter(parameter)
            gap = MAX_SCORE - score
            if gap <= 0:
                continue
            areas.append(
                ImprovementArea(
                    parameter_id=parameter.id,
                    measure_id=parameter.measure_id,
                    title=parameter.title,
                    score=score,
                    impact=gap * parameter.weightage / 100,
                )
            )

        areas.sort(key=lambda area: area.impact, reverse=True)
        return areas[: self._improvement_area_limit]

    def collect_warnings(self, parameters: list[Parameter]) -> list[str]:
        """Describe input problems that were recovered from silently."""
        warnings: list[str] = []
        for code, ids in find_duplicate_measure_ids(parameters).items():
            logger.warning(
                "Duplicate measure code in parameter set",
                measure_id=code,
                parameter_ids=ids,
            )
            warnings.append(
                f"Measure code {code!r} is shared by parameters "
                f"{', '.join(str(i) for i in ids)}"
            )
        for parameter in parameters:
            if parameter.denominator == 0:
                warnings.append(
                    f"Parameter {parameter.id} ({parameter.measure_id}) has a "
                    "denominator of 0 and scores 0"
                )
        return warnings

    def compute_index(
        self,
        parameters: list[Parameter],
        organization: str = DEFAULT_ORGANIZATION,
    ) -> IndexResult:
        """Run the full scoring pipeline over a parameter set.

        Args:
            parameters: Working parameter records. Not modified.
            organization: Organization name shown in reports.

        Returns:
            IndexResult with composite score, maturity classification,
            rollups, improvement areas and warnings.
        """
        snapshot = [replace(p) for p in parameters]
        for parameter in snapshot:
            parameter.self_assessment_score = score_parameter(parameter)

        total_score = self.compute_total(snapshot)
        maturity_level = score_to_maturity_level(total_score)
        category_scores = aggregate_by_category(snapshot)

        result = IndexResult(
            total_score=total_score,
            maturity_level=maturity_level,
            maturity_description=maturity_description(maturity_level),
            organization=organization,
            assessed_at=datetime.now(tz=timezone.utc),
            parameters=snapshot,
            category_scores=category_scores,
            domain_scores=roll_up(category_scores),
            improvement_areas=self.improvement_areas(snapshot),
            warnings=self.collect_warnings(snapshot),
        )

        logger.info(
            "CCI index computed",
            organization=organization,
            total_score=round(total_score, 2),
            maturity_level=maturity_level,
            parameter_count=len(snapshot),
            warning_count=len(result.warnings),
        )
        return result


def compute_index(
    parameters: list[Parameter],
    organization: str = DEFAULT_ORGANIZATION,
) -> IndexResult:
    """Compute the CCI index with default scorer settings."""
    return CCIScorer().compute_index(parameters, organization=organization)
