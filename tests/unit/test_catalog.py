"""Unit tests for the parameter catalog and working parameter records."""

import dataclasses
import random

import pytest

from cci_calculator.core.aggregation import main_category_of
from cci_calculator.core.catalog import (
    CATEGORY_ORDER,
    CCI_PARAMETERS,
    DOMAIN_ORDER,
    TOTAL_WEIGHTAGE,
    TargetRule,
    get_definition,
)
from cci_calculator.core.parameters import (
    find_duplicate_measure_ids,
    generate_sample_data,
    new_working_set,
)


class TestCatalog:
    """Tests for the immutable 23-parameter catalog."""

    def test_catalog_has_23_parameters(self) -> None:
        assert len(CCI_PARAMETERS) == 23

    def test_ids_are_1_to_23_in_order(self) -> None:
        assert [p.id for p in CCI_PARAMETERS] == list(range(1, 24))

    def test_weightages_sum_to_100(self) -> None:
        assert sum(p.weightage for p in CCI_PARAMETERS) == 100
        assert TOTAL_WEIGHTAGE == 100

    def test_every_weightage_positive(self) -> None:
        assert all(p.weightage > 0 for p in CCI_PARAMETERS)

    def test_only_two_parameters_use_non_default_targets(self) -> None:
        non_default = {
            p.id: p.target for p in CCI_PARAMETERS if p.target is not TargetRule.HIGHER_IS_BETTER
        }
        assert non_default == {
            12: TargetRule.LOWER_IS_BETTER,
            19: TargetRule.HALF_COVERAGE_FULL,
        }

    def test_heaviest_parameter_is_vulnerability_remediation(self) -> None:
        heaviest = max(CCI_PARAMETERS, key=lambda p: p.weightage)
        assert heaviest.id == 2
        assert heaviest.weightage == 18

    def test_duplicate_measure_codes_reported(self) -> None:
        assert find_duplicate_measure_ids(CCI_PARAMETERS) == {
            "DE.CM.S5": [2, 6],
            "PR.AA.S10": [12, 14],
        }

    def test_definitions_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            CCI_PARAMETERS[0].weightage = 50  # type: ignore[misc]

    def test_get_definition_known_id(self) -> None:
        definition = get_definition(19)
        assert definition is not None
        assert definition.target is TargetRule.HALF_COVERAGE_FULL

    def test_get_definition_unknown_id(self) -> None:
        assert get_definition(0) is None
        assert get_definition(24) is None

    def test_every_category_has_a_canonical_position(self) -> None:
        for definition in CCI_PARAMETERS:
            assert definition.framework_category in CATEGORY_ORDER

    def test_catalog_spans_six_domains(self) -> None:
        domains = {main_category_of(p.framework_category) for p in CCI_PARAMETERS}
        assert domains == set(DOMAIN_ORDER)
        assert len(domains) == 6


class TestWorkingSet:
    """Tests for new_working_set."""

    def test_defaults_are_zero_over_one(self, working_set) -> None:
        assert len(working_set) == 23
        assert all(p.numerator == 0 and p.denominator == 1 for p in working_set)
        assert all(p.self_assessment_score == 0.0 for p in working_set)

    def test_working_set_mirrors_catalog(self, working_set) -> None:
        for parameter, definition in zip(working_set, CCI_PARAMETERS):
            assert parameter.id == definition.id
            assert parameter.measure_id == definition.measure_id
            assert parameter.target is definition.target
            assert parameter.weightage == definition.weightage
            assert parameter.framework_category == definition.framework_category

    def test_working_sets_are_independent(self) -> None:
        first = new_working_set()
        second = new_working_set()
        first[0].numerator = 42
        first[0].evidence = "changed"
        assert second[0].numerator == 0
        assert second[0].evidence == ""

    def test_editing_working_set_leaves_catalog_untouched(self, working_set) -> None:
        working_set[1].weightage = 99
        assert CCI_PARAMETERS[1].weightage == 18


class TestSampleData:
    """Tests for generate_sample_data."""

    def test_seeded_samples_are_reproducible(self) -> None:
        first = generate_sample_data(random.Random(7))
        second = generate_sample_data(random.Random(7))
        assert [(p.numerator, p.denominator) for p in first] == [
            (p.numerator, p.denominator) for p in second
        ]

    def test_sample_values_in_range(self) -> None:
        for parameter in generate_sample_data(random.Random(11)):
            assert 1 <= parameter.denominator <= 100
            assert 0 <= parameter.numerator <= parameter.denominator
            assert parameter.auditor_comments

    def test_lower_is_better_sample_stays_low(self) -> None:
        for seed in range(10):
            parameters = generate_sample_data(random.Random(seed))
            incident = next(p for p in parameters if p.target is TargetRule.LOWER_IS_BETTER)
            assert incident.numerator <= incident.denominator * 0.1

    def test_higher_is_better_sample_stays_high(self) -> None:
        for seed in range(10):
            for parameter in generate_sample_data(random.Random(seed)):
                if parameter.target is TargetRule.LOWER_IS_BETTER:
                    continue
                # floor() can drop at most one unit below the 70% draw
                assert parameter.numerator >= parameter.denominator * 0.7 - 1
