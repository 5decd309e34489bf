"""FastAPI router for the CCI self-assessment calculator.

All routes are thin: they parse inputs, build dependencies, delegate to
AssessmentService, and serialise responses. No scoring logic lives here.

API prefix: /api/v1/cci
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from cci_calculator.adapters.report_generator import ReportGeneratorAdapter
from cci_calculator.api.schemas import (
    CalculateRequest,
    CalculateResponse,
    CatalogResponse,
    CategoryScoreSchema,
    ImprovementAreaSchema,
    MaturityBandSchema,
    MaturityLevelsResponse,
    ParameterDefinitionSchema,
    ParameterResultSchema,
    ReportResponse,
    ScoreParameterRequest,
    ScoreParameterResponse,
)
from cci_calculator.core.aggregation import CategoryScore
from cci_calculator.core.catalog import ParameterDefinition
from cci_calculator.core.index import CCIScorer, IndexResult
from cci_calculator.core.parameters import Parameter, find_duplicate_measure_ids
from cci_calculator.core.scoring import (
    MATURITY_BANDS,
    maturity_description,
    weighted_score,
)
from cci_calculator.core.services import AssessmentService, ParameterNotFoundError
from cci_calculator.settings import Settings, get_settings

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/cci", tags=["CCI Assessment"])


# ---------------------------------------------------------------------------
# Dependency factories
# ---------------------------------------------------------------------------


def get_assessment_service(settings: Settings = Depends(get_settings)) -> AssessmentService:
    """Build AssessmentService from settings.

    Args:
        settings: Service settings.

    Returns:
        Configured AssessmentService instance.
    """
    return AssessmentService(
        scorer=CCIScorer(improvement_area_limit=settings.improvement_area_limit),
        default_organization=settings.default_organization,
    )


def get_report_generator(settings: Settings = Depends(get_settings)) -> ReportGeneratorAdapter:
    """Build the report content generator from settings."""
    return ReportGeneratorAdapter(settings)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------


def _definition_schema(definition: ParameterDefinition) -> ParameterDefinitionSchema:
    return ParameterDefinitionSchema(
        id=definition.id,
        measure_id=definition.measure_id,
        title=definition.title,
        description=definition.description,
        formula=definition.formula,
        target=int(definition.target),
        weightage=definition.weightage,
        control_info=definition.control_info,
        implementation_evidence=definition.implementation_evidence,
        framework_category=definition.framework_category,
        numerator_help=definition.numerator_help,
        denominator_help=definition.denominator_help,
    )


def _category_schema(score: CategoryScore) -> CategoryScoreSchema:
    return CategoryScoreSchema(
        name=score.name,
        score=score.score,
        weighted_score=score.weighted_score,
        total_weightage=score.total_weightage,
        maturity_level=score.maturity_level,
        parameter_count=score.parameter_count,
    )


def _parameter_schema(parameter: Parameter) -> ParameterResultSchema:
    return ParameterResultSchema(
        id=parameter.id,
        measure_id=parameter.measure_id,
        title=parameter.title,
        framework_category=parameter.framework_category,
        target=int(parameter.target),
        weightage=parameter.weightage,
        numerator=parameter.numerator,
        denominator=parameter.denominator,
        self_assessment_score=parameter.self_assessment_score,
        weighted_score=weighted_score(parameter),
    )


def _result_response(result: IndexResult) -> CalculateResponse:
    return CalculateResponse(
        organization=result.organization,
        assessed_at=result.assessed_at,
        total_score=result.total_score,
        maturity_level=result.maturity_level,
        maturity_description=result.maturity_description,
        parameters=[_parameter_schema(p) for p in result.parameters],
        category_scores=[_category_schema(s) for s in result.category_scores.values()],
        domain_scores=[_category_schema(s) for s in result.domain_scores.values()],
        improvement_areas=[
            ImprovementAreaSchema(
                parameter_id=area.parameter_id,
                measure_id=area.measure_id,
                title=area.title,
                score=area.score,
                impact=area.impact,
            )
            for area in result.improvement_areas
        ],
        warnings=result.warnings,
    )


async def _calculate(body: CalculateRequest, service: AssessmentService) -> IndexResult:
    try:
        return await service.calculate(
            inputs=[item.model_dump() for item in body.parameters],
            organization=body.organization,
        )
    except (ParameterNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc


# ---------------------------------------------------------------------------
# Catalog endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/parameters",
    response_model=CatalogResponse,
    summary="List the CCI parameter catalog",
)
async def list_parameters(
    service: AssessmentService = Depends(get_assessment_service),
) -> CatalogResponse:
    """Return all 23 CCI measures with their formulas, targets and weightages."""
    definitions = await service.list_parameters()
    return CatalogResponse(
        parameters=[_definition_schema(d) for d in definitions],
        total=len(definitions),
        total_weightage=sum(d.weightage for d in definitions),
        duplicate_measure_ids=find_duplicate_measure_ids(definitions),
    )


@router.get(
    "/parameters/{parameter_id}",
    response_model=ParameterDefinitionSchema,
    summary="Retrieve one CCI parameter",
)
async def get_parameter(
    parameter_id: int = Path(..., description="Catalog parameter id"),
    service: AssessmentService = Depends(get_assessment_service),
) -> ParameterDefinitionSchema:
    """Return a single catalog measure."""
    try:
        definition = await service.get_parameter(parameter_id)
    except ParameterNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return _definition_schema(definition)


@router.get(
    "/maturity-levels",
    response_model=MaturityLevelsResponse,
    summary="List maturity bands",
)
async def list_maturity_levels() -> MaturityLevelsResponse:
    """Return the maturity band table, highest band first."""
    return MaturityLevelsResponse(
        bands=[
            MaturityBandSchema(
                level=level,
                min_score=threshold,
                description=maturity_description(level),
            )
            for threshold, level in MATURITY_BANDS
        ]
    )


# ---------------------------------------------------------------------------
# Scoring endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    status_code=status.HTTP_200_OK,
    summary="Compute the Cyber Capability Index",
)
async def calculate(
    body: CalculateRequest,
    service: AssessmentService = Depends(get_assessment_service),
) -> CalculateResponse:
    """Score an assessment from numerator/denominator inputs.

    Returns the composite index (0-100), maturity level, per-parameter
    scores, category and domain rollups, improvement areas and warnings.
    """
    result = await _calculate(body, service)
    return _result_response(result)


@router.post(
    "/score",
    response_model=ScoreParameterResponse,
    status_code=status.HTTP_200_OK,
    summary="Score a single measure",
)
async def score_parameter(
    body: ScoreParameterRequest,
    service: AssessmentService = Depends(get_assessment_service),
) -> ScoreParameterResponse:
    """Score one ad-hoc measure given its inputs, target and weightage."""
    scored = await service.score_parameter(
        numerator=body.numerator,
        denominator=body.denominator,
        target=body.target,
        weightage=body.weightage,
    )
    return ScoreParameterResponse(**scored)


@router.get(
    "/sample",
    response_model=CalculateResponse,
    summary="Score generated demonstration data",
)
async def sample(
    seed: int | None = Query(default=None, description="Seed for a reproducible sample"),
    service: AssessmentService = Depends(get_assessment_service),
    settings: Settings = Depends(get_settings),
) -> CalculateResponse:
    """Return an assessment computed over generated demonstration inputs."""
    result = await service.sample(seed=seed if seed is not None else settings.sample_seed)
    return _result_response(result)


# ---------------------------------------------------------------------------
# Report endpoint
# ---------------------------------------------------------------------------


@router.post(
    "/report",
    response_model=ReportResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate structured report content",
)
async def generate_report(
    body: CalculateRequest,
    include_parameters: bool = Query(default=True),
    service: AssessmentService = Depends(get_assessment_service),
    report_generator: ReportGeneratorAdapter = Depends(get_report_generator),
) -> ReportResponse:
    """Compute the index and return format-neutral report sections."""
    result = await _calculate(body, service)
    content = await report_generator.generate(result, include_parameters=include_parameters)

    if result.warnings:
        logger.warning(
            "Report generated with data-quality warnings",
            organization=result.organization,
            warnings=result.warnings,
        )
    return ReportResponse(content=content)
