"""Pydantic request/response schemas for the CCI calculator API.

All API inputs and outputs are strictly typed Pydantic v2 models.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from cci_calculator.core.catalog import TargetRule


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class ParameterDefinitionSchema(BaseModel):
    """A catalog measure as shown to assessors."""

    id: int
    measure_id: str
    title: str
    description: str
    formula: str
    target: int = Field(..., description="0 (lower is better) | 50 | 100 (higher is better)")
    weightage: float
    control_info: str
    implementation_evidence: str
    framework_category: str
    numerator_help: str
    denominator_help: str


class CatalogResponse(BaseModel):
    """The full parameter catalog.

    Attributes:
        parameters: All catalog measures in catalog order.
        total: Number of measures.
        total_weightage: Sum of weightages (100 for the published catalog).
        duplicate_measure_ids: Measure codes used by more than one parameter.
    """

    parameters: list[ParameterDefinitionSchema]
    total: int
    total_weightage: float
    duplicate_measure_ids: dict[str, list[int]]


# ---------------------------------------------------------------------------
# Calculation
# ---------------------------------------------------------------------------


class ParameterInputSchema(BaseModel):
    """Assessor input for one catalog parameter.

    Attributes:
        id: Catalog parameter id.
        numerator: Count of compliant items.
        denominator: Count of applicable items. 0 scores the parameter as 0.
        evidence: Implementation evidence notes.
        auditor_comments: Auditor commentary.
    """

    id: int = Field(..., ge=1)
    numerator: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    denominator: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    evidence: str | None = Field(default=None, max_length=10000)
    auditor_comments: str | None = Field(default=None, max_length=10000)


class CalculateRequest(BaseModel):
    """Request body for an index calculation or report.

    Parameters not listed keep numerator 0 and denominator 1.
    """

    organization: str | None = Field(default=None, min_length=1, max_length=200)
    parameters: list[ParameterInputSchema] = Field(default_factory=list)


class ParameterResultSchema(BaseModel):
    """A scored parameter."""

    id: int
    measure_id: str
    title: str
    framework_category: str | None
    target: int
    weightage: float
    numerator: float
    denominator: float
    self_assessment_score: float
    weighted_score: float


class CategoryScoreSchema(BaseModel):
    """Aggregated score for a framework category or domain."""

    name: str
    score: float
    weighted_score: float
    total_weightage: float
    maturity_level: str
    parameter_count: int


class ImprovementAreaSchema(BaseModel):
    """A high-impact improvement opportunity."""

    parameter_id: int
    measure_id: str
    title: str
    score: float
    impact: float


class CalculateResponse(BaseModel):
    """Full result of an index calculation."""

    organization: str
    assessed_at: datetime
    total_score: float
    maturity_level: str
    maturity_description: str
    parameters: list[ParameterResultSchema]
    category_scores: list[CategoryScoreSchema]
    domain_scores: list[CategoryScoreSchema]
    improvement_areas: list[ImprovementAreaSchema]
    warnings: list[str]


# ---------------------------------------------------------------------------
# Single parameter scoring
# ---------------------------------------------------------------------------


class ScoreParameterRequest(BaseModel):
    """Ad-hoc scoring request for a single measure."""

    numerator: float = Field(..., ge=0, allow_inf_nan=False)
    denominator: float = Field(..., ge=0, allow_inf_nan=False)
    target: int = Field(default=100, description="0 | 50 | 100")
    weightage: float = Field(default=100.0, ge=0, allow_inf_nan=False)

    @field_validator("target")
    @classmethod
    def validate_target(cls, value: int) -> int:
        """Reject targets without a scoring rule."""
        TargetRule.from_target(value)
        return value


class ScoreParameterResponse(BaseModel):
    """Score for a single measure."""

    percentage: float
    score: float
    weighted_score: float


# ---------------------------------------------------------------------------
# Maturity levels and reports
# ---------------------------------------------------------------------------


class MaturityBandSchema(BaseModel):
    """One maturity band (inclusive lower bound)."""

    level: str
    min_score: float
    description: str


class MaturityLevelsResponse(BaseModel):
    """The maturity band table, highest band first."""

    bands: list[MaturityBandSchema]


class ReportResponse(BaseModel):
    """Structured report content, ready for a document renderer."""

    content: dict[str, Any]
