"""Shared test fixtures for cscrf-cci-calculator."""

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cci_calculator.core.catalog import TargetRule
from cci_calculator.core.parameters import Parameter, new_working_set
from cci_calculator.main import app


def _make_parameter(
    numerator: float,
    denominator: float,
    target: TargetRule | int = TargetRule.HIGHER_IS_BETTER,
    weightage: float = 1.0,
    parameter_id: int = 1,
    framework_category: str | None = None,
) -> Parameter:
    """Build a standalone Parameter for scoring tests."""
    return Parameter(
        id=parameter_id,
        measure_id=f"TEST.{parameter_id}",
        title=f"Test measure {parameter_id}",
        target=target,
        weightage=weightage,
        numerator=numerator,
        denominator=denominator,
        framework_category=framework_category,
    )


def _fill_full_marks(parameters: list[Parameter]) -> list[Parameter]:
    """Set every parameter to the input that earns full credit under its rule."""
    for parameter in parameters:
        parameter.denominator = 10
        if parameter.target is TargetRule.LOWER_IS_BETTER:
            parameter.numerator = 0
        else:
            parameter.numerator = 10
    return parameters


@pytest.fixture()
def make_parameter() -> Callable[..., Parameter]:
    """Factory for standalone Parameter records."""
    return _make_parameter


@pytest.fixture()
def fill_full_marks() -> Callable[[list[Parameter]], list[Parameter]]:
    """Function that sets a parameter list to full-credit inputs."""
    return _fill_full_marks


@pytest.fixture()
def working_set() -> list[Parameter]:
    """Fresh catalog working set with default inputs (numerator 0, denominator 1)."""
    return new_working_set()


@pytest.fixture()
def full_marks_set() -> list[Parameter]:
    """Catalog working set where every parameter earns full credit."""
    return _fill_full_marks(new_working_set())


@pytest_asyncio.fixture()
async def api_client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as client:
        yield client

    app.dependency_overrides.clear()
