"""Unit tests for service settings."""

import pytest

from cci_calculator.core.index import DEFAULT_IMPROVEMENT_AREA_LIMIT, DEFAULT_ORGANIZATION
from cci_calculator.settings import Settings


class TestSettings:
    def test_scoring_defaults_follow_core_constants(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CCI_DEFAULT_ORGANIZATION", raising=False)
        monkeypatch.delenv("CCI_IMPROVEMENT_AREA_LIMIT", raising=False)

        settings = Settings()

        assert settings.default_organization == DEFAULT_ORGANIZATION
        assert settings.improvement_area_limit == DEFAULT_IMPROVEMENT_AREA_LIMIT

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CCI_DEFAULT_ORGANIZATION", "Acme Broking")
        monkeypatch.setenv("CCI_COMPLIANCE_THRESHOLD", "75")

        settings = Settings()

        assert settings.default_organization == "Acme Broking"
        assert settings.compliance_threshold == 75.0
