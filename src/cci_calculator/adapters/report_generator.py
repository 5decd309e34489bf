"""Report content generation for CCI assessments.

Assembles an IndexResult into structured report sections (executive summary,
domain and category analysis, parameter details, improvement areas). The
output is format-neutral: document renderers (Word, PDF, CSV, Markdown) lay
it out but never recompute scores or maturity levels themselves.
"""

from datetime import datetime, timezone
from typing import Any

import structlog

from cci_calculator.core.aggregation import CategoryScore
from cci_calculator.core.catalog import get_definition
from cci_calculator.core.index import IndexResult
from cci_calculator.core.parameters import Parameter
from cci_calculator.core.scoring import MAX_SCORE, weighted_score
from cci_calculator.settings import Settings

logger = structlog.get_logger(__name__)

COMPLIANT: str = "Compliant"
NON_COMPLIANT: str = "Non-Compliant"


class ReportGeneratorAdapter:
    """Structured report content generator.

    Args:
        settings: Service settings with the compliance threshold.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def generate(
        self,
        result: IndexResult,
        include_parameters: bool = True,
    ) -> dict[str, Any]:
        """Generate structured report content from a computed index.

        Args:
            result: Computed assessment result.
            include_parameters: Whether to include per-parameter details.

        Returns:
            Dict with report metadata and a ``sections`` mapping.
        """
        now = datetime.now(tz=timezone.utc)

        sections: dict[str, Any] = {
            "executive_summary": self._build_executive_summary(result),
            "domain_analysis": {
                "title": "Framework Domain Scores",
                "domains": [self._score_entry(s) for s in result.domain_scores.values()],
            },
            "category_analysis": {
                "title": "Framework Category Scores",
                "categories": [self._score_entry(s) for s in result.category_scores.values()],
            },
            "improvement_areas": {
                "title": "Priority Improvement Areas",
                "items": [
                    {
                        "parameter_id": area.parameter_id,
                        "measure_id": area.measure_id,
                        "title": area.title,
                        "score": round(area.score, 2),
                        "impact": round(area.impact, 2),
                    }
                    for area in result.improvement_areas
                ],
            },
        }
        if include_parameters:
            sections["parameter_details"] = {
                "title": "Parameter Details",
                "parameters": [self._parameter_entry(p) for p in result.parameters],
            }

        content: dict[str, Any] = {
            "title": "Cyber Capability Index (CCI) Assessment Report",
            "generated_at": now.isoformat(),
            "assessed_at": result.assessed_at.isoformat(),
            "organization": result.organization,
            "sections": sections,
            "warnings": list(result.warnings),
            "metadata": {
                "total_score": round(result.total_score, 2),
                "maturity_level": result.maturity_level,
                "parameter_count": len(result.parameters),
                "include_parameters": include_parameters,
                "template_version": "1.0",
            },
        }

        logger.debug(
            "Report content generated",
            organization=result.organization,
            section_count=len(sections),
            warning_count=len(result.warnings),
        )
        return content

    def compliance_status(self, total_score: float) -> str:
        """Overall status: Compliant at or above the compliance threshold."""
        if total_score >= self._settings.compliance_threshold:
            return COMPLIANT
        return NON_COMPLIANT

    def _build_executive_summary(self, result: IndexResult) -> dict[str, Any]:
        """Build the executive summary section.

        Args:
            result: Computed assessment result.

        Returns:
            Executive summary section dict.
        """
        total = round(result.total_score, 2)
        summary: dict[str, Any] = {
            "title": "Executive Summary",
            "total_score": total,
            "maturity_level": result.maturity_level,
            "maturity_description": result.maturity_description,
            "compliance_status": self.compliance_status(result.total_score),
            "headline": (
                f"{result.organization} has a Cyber Capability Index of {total:.2f}/100 "
                f"({result.maturity_level})."
            ),
            "key_findings": [],
        }

        if result.domain_scores:
            strongest = max(result.domain_scores.values(), key=lambda s: s.score)
            weakest = min(result.domain_scores.values(), key=lambda s: s.score)
            summary["key_findings"] = [
                f"Overall maturity level: {result.maturity_level} ({total:.2f}/100)",
                f"Strongest domain: {strongest.name} ({strongest.score:.2f})",
                f"Priority improvement domain: {weakest.name} ({weakest.score:.2f})",
            ]
        return summary

    @staticmethod
    def _score_entry(score: CategoryScore) -> dict[str, Any]:
        return {
            "name": score.name,
            "score": round(score.score, 2),
            "weighted_score": round(score.weighted_score, 2),
            "total_weightage": score.total_weightage,
            "maturity_level": score.maturity_level,
            "parameter_count": score.parameter_count,
        }

    @staticmethod
    def _parameter_entry(parameter: Parameter) -> dict[str, Any]:
        definition = get_definition(parameter.id)
        score = parameter.self_assessment_score
        return {
            "id": parameter.id,
            "measure_id": parameter.measure_id,
            "title": parameter.title,
            "framework_category": parameter.framework_category,
            "formula": definition.formula if definition else "",
            "required_evidence": definition.implementation_evidence if definition else "",
            "target": int(parameter.target),
            "weightage": parameter.weightage,
            "numerator": parameter.numerator,
            "denominator": parameter.denominator,
            "score": round(score, 2),
            "weighted_score": round(weighted_score(parameter), 2),
            "status": COMPLIANT if score >= MAX_SCORE else NON_COMPLIANT,
            "evidence": parameter.evidence,
            "auditor_comments": parameter.auditor_comments,
        }
