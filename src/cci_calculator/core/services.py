"""Service layer orchestrating CCI self-assessments.

Implements the assessment workflow behind the API:
    1. list_parameters()  - the catalog shown to assessors
    2. calculate()        - merge assessor inputs into a working set and score it
    3. score_parameter()  - score a single ad-hoc measure
    4. sample()           - score generated demonstration data

No FastAPI imports belong here; routes translate the exceptions below into
HTTP responses.
"""

import random
from typing import Any

import structlog

from cci_calculator.core.catalog import (
    CCI_PARAMETERS,
    ParameterDefinition,
    TargetRule,
    get_definition,
)
from cci_calculator.core.index import DEFAULT_ORGANIZATION, CCIScorer, IndexResult
from cci_calculator.core.parameters import (
    Parameter,
    check_input,
    generate_sample_data,
    new_working_set,
)
from cci_calculator.core.scoring import (
    compute_percentage,
    score_parameter,
    weighted_score,
)

logger = structlog.get_logger(__name__)


class ParameterNotFoundError(Exception):
    """Raised when a parameter id is not in the catalog."""


class AssessmentService:
    """Orchestrates CCI assessments over the parameter catalog.

    Args:
        scorer: Scoring pipeline used for every computation.
        default_organization: Organization name used when none is supplied.
    """

    def __init__(
        self,
        scorer: CCIScorer,
        default_organization: str = DEFAULT_ORGANIZATION,
    ) -> None:
        self._scorer = scorer
        self._default_organization = default_organization

    async def list_parameters(self) -> list[ParameterDefinition]:
        """Return every catalog definition in catalog order."""
        return list(CCI_PARAMETERS)

    async def get_parameter(self, parameter_id: int) -> ParameterDefinition:
        """Look up one catalog definition.

        Raises:
            ParameterNotFoundError: If no parameter has this id.
        """
        definition = get_definition(parameter_id)
        if definition is None:
            raise ParameterNotFoundError(f"Parameter {parameter_id} not found in catalog")
        return definition

    def build_parameters(self, inputs: list[dict[str, Any]]) -> list[Parameter]:
        """Apply assessor inputs to a fresh working set.

        Each input dict carries ``id`` plus any of ``numerator``,
        ``denominator``, ``evidence`` and ``auditor_comments``. Parameters
        without an input keep their defaults (numerator 0, denominator 1).
        A later input for the same id overrides an earlier one.

        Args:
            inputs: Per-parameter input dicts.

        Returns:
            Working parameter list in catalog order.

        Raises:
            ParameterNotFoundError: If an input references an unknown id.
            ValueError: If a numerator or denominator is negative or not finite.
        """
        parameters = new_working_set()
        by_id = {parameter.id: parameter for parameter in parameters}

        for item in inputs:
            parameter_id = item["id"]
            parameter = by_id.get(parameter_id)
            if parameter is None:
                raise ParameterNotFoundError(f"Parameter {parameter_id} not found in catalog")

            numerator = item.get("numerator")
            denominator = item.get("denominator")
            if numerator is not None:
                check_input("numerator", numerator, parameter_id)
                parameter.numerator = numerator
            if denominator is not None:
                check_input("denominator", denominator, parameter_id)
                parameter.denominator = denominator
            if item.get("evidence") is not None:
                parameter.evidence = item["evidence"]
            if item.get("auditor_comments") is not None:
                parameter.auditor_comments = item["auditor_comments"]

        return parameters

    async def calculate(
        self,
        inputs: list[dict[str, Any]],
        organization: str | None = None,
    ) -> IndexResult:
        """Score an assessment built from assessor inputs.

        Args:
            inputs: Per-parameter input dicts (see ``build_parameters``).
            organization: Organization name; falls back to the default.

        Returns:
            The computed IndexResult.
        """
        parameters = self.build_parameters(inputs)
        result = self._scorer.compute_index(
            parameters,
            organization=organization or self._default_organization,
        )

        logger.info(
            "Assessment calculated",
            organization=result.organization,
            input_count=len(inputs),
            total_score=round(result.total_score, 2),
            maturity_level=result.maturity_level,
        )
        return result

    async def score_parameter(
        self,
        numerator: float,
        denominator: float,
        target: int,
        weightage: float,
    ) -> dict[str, float]:
        """Score a single ad-hoc measure outside the catalog.

        Raises:
            UnsupportedTargetError: If target is not 0, 50 or 100.
            ValueError: If any input is negative.
        """
        parameter = Parameter(
            id=0,
            measure_id="ad-hoc",
            title="Ad-hoc measure",
            target=TargetRule.from_target(target),
            weightage=weightage,
            numerator=numerator,
            denominator=denominator,
        )
        percentage = compute_percentage(parameter) if denominator else 0.0
        return {
            "percentage": percentage,
            "score": score_parameter(parameter),
            "weighted_score": weighted_score(parameter),
        }

    async def sample(
        self,
        seed: int | None = None,
        organization: str | None = None,
    ) -> IndexResult:
        """Score generated demonstration data.

        Args:
            seed: Seed for reproducible samples; None draws a fresh sample.
            organization: Organization name; falls back to the default.
        """
        parameters = generate_sample_data(random.Random(seed))
        return self._scorer.compute_index(
            parameters,
            organization=organization or self._default_organization,
        )
