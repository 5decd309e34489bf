"""Unit tests for ReportGeneratorAdapter."""

import pytest

from cci_calculator.adapters.report_generator import (
    COMPLIANT,
    NON_COMPLIANT,
    ReportGeneratorAdapter,
)
from cci_calculator.core.index import compute_index
from cci_calculator.settings import Settings


@pytest.fixture()
def generator() -> ReportGeneratorAdapter:
    return ReportGeneratorAdapter(Settings())


class TestComplianceStatus:
    """Tests for the overall compliance status threshold."""

    @pytest.mark.parametrize(
        ("total", "status"),
        [(100.0, COMPLIANT), (60.0, COMPLIANT), (59.99, NON_COMPLIANT), (0.0, NON_COMPLIANT)],
    )
    def test_default_threshold(self, generator: ReportGeneratorAdapter, total: float, status: str) -> None:
        assert generator.compliance_status(total) == status

    def test_threshold_from_settings(self) -> None:
        generator = ReportGeneratorAdapter(Settings(compliance_threshold=80.0))
        assert generator.compliance_status(70.0) == NON_COMPLIANT
        assert generator.compliance_status(80.0) == COMPLIANT


class TestGenerate:
    """Tests for structured report generation."""

    @pytest.mark.asyncio()
    async def test_report_has_all_sections(self, generator: ReportGeneratorAdapter, full_marks_set) -> None:
        content = await generator.generate(compute_index(full_marks_set, organization="Acme"))

        assert set(content["sections"]) == {
            "executive_summary",
            "domain_analysis",
            "category_analysis",
            "improvement_areas",
            "parameter_details",
        }
        assert content["organization"] == "Acme"
        assert content["metadata"]["total_score"] == 100.0
        assert content["metadata"]["parameter_count"] == 23

    @pytest.mark.asyncio()
    async def test_executive_summary_full_marks(self, generator: ReportGeneratorAdapter, full_marks_set) -> None:
        content = await generator.generate(compute_index(full_marks_set, organization="Acme"))

        summary = content["sections"]["executive_summary"]
        assert summary["compliance_status"] == COMPLIANT
        assert summary["maturity_level"] == "Exceptional"
        assert summary["headline"] == "Acme has a Cyber Capability Index of 100.00/100 (Exceptional)."
        assert len(summary["key_findings"]) == 3

    @pytest.mark.asyncio()
    async def test_default_set_is_non_compliant(self, generator: ReportGeneratorAdapter, working_set) -> None:
        content = await generator.generate(compute_index(working_set))

        summary = content["sections"]["executive_summary"]
        assert summary["compliance_status"] == NON_COMPLIANT
        assert summary["maturity_level"] == "Fail"
        assert len(content["sections"]["improvement_areas"]["items"]) == 4

    @pytest.mark.asyncio()
    async def test_parameter_status_requires_full_score(self, generator: ReportGeneratorAdapter, working_set) -> None:
        content = await generator.generate(compute_index(working_set))

        statuses = {
            entry["id"]: entry["status"]
            for entry in content["sections"]["parameter_details"]["parameters"]
        }
        # Zero incidents is full credit for the lower-is-better measure
        assert statuses[12] == COMPLIANT
        assert statuses[1] == NON_COMPLIANT

    @pytest.mark.asyncio()
    async def test_parameter_details_can_be_omitted(self, generator: ReportGeneratorAdapter, working_set) -> None:
        content = await generator.generate(compute_index(working_set), include_parameters=False)

        assert "parameter_details" not in content["sections"]
        assert content["metadata"]["include_parameters"] is False

    @pytest.mark.asyncio()
    async def test_warnings_carried_into_report(self, generator: ReportGeneratorAdapter, working_set) -> None:
        content = await generator.generate(compute_index(working_set))
        assert any("DE.CM.S5" in warning for warning in content["warnings"])

    @pytest.mark.asyncio()
    async def test_domain_analysis_lists_six_domains(self, generator: ReportGeneratorAdapter, working_set) -> None:
        content = await generator.generate(compute_index(working_set))

        domains = content["sections"]["domain_analysis"]["domains"]
        assert [d["name"] for d in domains] == [
            "Governance",
            "Identify",
            "Protect",
            "Detect",
            "Respond",
            "Recover",
        ]
