"""Category and domain rollups for CCI parameters.

Parameters are grouped by framework category ('Protect: Data Security'),
then categories are rolled up into domains ('Protect'). Both levels use the
same reduction, sum(weighted score) / sum(weightage) * 100, so rolling up via
categories yields the same domain scores as grouping parameters by domain
directly.

All report consumers call into this module; none recompute category scores
on their own.
"""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from cci_calculator.core.catalog import CATEGORY_ORDER, DOMAIN_ORDER
from cci_calculator.core.parameters import Parameter
from cci_calculator.core.scoring import score_to_maturity_level, weighted_score

logger = structlog.get_logger(__name__)

UNCATEGORIZED: str = "Uncategorized"


@dataclass(frozen=True)
class CategoryScore:
    """Aggregated score for a group of parameters.

    Attributes:
        name: Category or domain label.
        score: Weighted average score in range 0.0-100.0.
        weighted_score: Sum of member weighted scores.
        total_weightage: Sum of member weightages.
        maturity_level: Maturity label for ``score``. Independent of the
            composite maturity level.
        parameter_count: Number of parameters in the group.
    """

    name: str
    score: float
    weighted_score: float
    total_weightage: float
    maturity_level: str
    parameter_count: int


def framework_category_of(parameter: Parameter) -> str:
    """Default grouping key: the parameter's framework category."""
    return parameter.framework_category or UNCATEGORIZED


def main_category_of(category: str) -> str:
    """Return the domain part of a '<Domain>: <Sub-category>' label.

    Labels without a separator are their own domain.
    """
    domain, separator, _ = category.partition(":")
    if not separator:
        return category.strip() or UNCATEGORIZED
    return domain.strip() or UNCATEGORIZED


def _build_score(
    name: str,
    weighted_sum: float,
    total_weightage: float,
    parameter_count: int,
) -> CategoryScore:
    score = weighted_sum / total_weightage * 100 if total_weightage > 0 else 0.0
    return CategoryScore(
        name=name,
        score=score,
        weighted_score=weighted_sum,
        total_weightage=total_weightage,
        maturity_level=score_to_maturity_level(score),
        parameter_count=parameter_count,
    )


def _ordered(scores: dict[str, CategoryScore], order: list[str]) -> dict[str, CategoryScore]:
    """Sort by canonical order; unknown names keep first-seen order, Uncategorized last."""

    def sort_key(name: str) -> int:
        if name in order:
            return order.index(name)
        if name == UNCATEGORIZED:
            return len(order) + 1
        return len(order)

    return {name: scores[name] for name in sorted(scores, key=sort_key)}


def aggregate_by_category(
    parameters: list[Parameter],
    key: Callable[[Parameter], str] = framework_category_of,
) -> dict[str, CategoryScore]:
    """Group parameters by a category label and score each group.

    Args:
        parameters: Parameters to aggregate.
        key: Grouping function. An empty label falls into 'Uncategorized'.

    Returns:
        Ordered mapping of category label to CategoryScore.
    """
    groups: dict[str, list[Parameter]] = defaultdict(list)
    for parameter in parameters:
        groups[key(parameter) or UNCATEGORIZED].append(parameter)

    scores = {
        name: _build_score(
            name=name,
            weighted_sum=sum(weighted_score(p) for p in members),
            total_weightage=sum(p.weightage for p in members),
            parameter_count=len(members),
        )
        for name, members in groups.items()
    }

    logger.debug(
        "Category scores aggregated",
        category_count=len(scores),
        parameter_count=len(parameters),
    )
    return _ordered(scores, CATEGORY_ORDER)


def roll_up(
    category_scores: dict[str, CategoryScore],
    key: Callable[[str], str] = main_category_of,
) -> dict[str, CategoryScore]:
    """Combine category scores into higher-level groups.

    Uses the same weighted-average reduction as ``aggregate_by_category``,
    weighting each category by its total weightage.

    Args:
        category_scores: Output of ``aggregate_by_category``.
        key: Maps a category label to its parent group label.

    Returns:
        Ordered mapping of parent label to CategoryScore.
    """
    groups: dict[str, list[CategoryScore]] = defaultdict(list)
    for category in category_scores.values():
        groups[key(category.name)].append(category)

    scores = {
        name: _build_score(
            name=name,
            weighted_sum=sum(c.weighted_score for c in members),
            total_weightage=sum(c.total_weightage for c in members),
            parameter_count=sum(c.parameter_count for c in members),
        )
        for name, members in groups.items()
    }
    return _ordered(scores, DOMAIN_ORDER)


def aggregate_by_domain(parameters: list[Parameter]) -> dict[str, CategoryScore]:
    """Score each framework domain via its sub-category rollup."""
    return roll_up(aggregate_by_category(parameters))
