"""Test Grading Config

Tests YAML loading, structural checks and break point validation.
"""

from pathlib import Path
import sys
import textwrap

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mutationgrader.exceptions import ConfigError, InvalidBreakpointOrdering, UnsupportedLocationFormat
from mutationgrader.grading_config import (
    BreakPoint,
    GradedUnit,
    GradingConfig,
    load_grading_config,
    validate_config,
)


def make_unit(name, break_points, locations=("foo.ts:1-5",)):
    """Helper to build a graded unit from (threshold, points) pairs"""
    return GradedUnit(
        name=name,
        break_points=tuple(BreakPoint(t, p) for t, p in break_points),
        locations=tuple(locations),
    )


def make_config(*units):
    return GradingConfig(graded_units=tuple(units))


GRADING_YML = textwrap.dedent("""\
    gradedUnits:
      - name: createConversationArea
        breakPoints:
          - minimumMutantsDetected: 0
            pointsToAward: 0
          - minimumMutantsDetected: 3
            pointsToAward: 5
          - minimumMutantsDetected: 6
            pointsToAward: 10
        locations:
          - src/lib/CoveyTownController.ts:120-148
          - src/lib/CoveyTownController.ts:200
      - name: leaveConversationArea
        breakPoints:
          - {minimumMutantsDetected: 2, pointsToAward: 4.5}
        locations: ["src/lib/CoveyTownController.ts:90-110"]
    submissionFiles:
      - name: CoveyTownConversationAPI.test.ts
        dest: src/client/CoveyTownConversationAPI.test.ts
    expectedTSIgnore: 0
    expectedESlintIgnore: 2
""")


class TestValidateConfig:
    """Break point ordering rules"""

    def test_ascending_thresholds_accepted(self):
        validate_config(make_config(make_unit("U", [(0, 0), (3, 5), (6, 10)])))

    def test_decreasing_points_accepted(self):
        """Only thresholds are ordered; point values are trusted"""
        validate_config(make_config(make_unit("U", [(0, 10), (5, 5)])))

    def test_duplicate_threshold_rejected(self):
        with pytest.raises(InvalidBreakpointOrdering) as excinfo:
            validate_config(make_config(make_unit("Dup", [(5, 1), (5, 2)])))
        assert excinfo.value.unit_name == "Dup"
        assert "Dup" in str(excinfo.value)

    def test_out_of_order_rejected(self):
        with pytest.raises(InvalidBreakpointOrdering):
            validate_config(make_config(make_unit("U", [(5, 1), (2, 2)])))

    def test_names_the_failing_unit(self):
        config = make_config(
            make_unit("Good", [(0, 0), (1, 1)]),
            make_unit("Bad", [(3, 1), (1, 2)]),
        )
        with pytest.raises(InvalidBreakpointOrdering) as excinfo:
            validate_config(config)
        assert excinfo.value.unit_name == "Bad"

    def test_empty_break_points_rejected(self):
        with pytest.raises(InvalidBreakpointOrdering):
            validate_config(make_config(make_unit("Empty", [])))

    def test_bad_location_rejected(self):
        with pytest.raises(UnsupportedLocationFormat):
            validate_config(make_config(make_unit("U", [(0, 1)], ["foo.ts:1:2"])))

    def test_validation_does_not_reorder(self):
        unit = make_unit("U", [(0, 0), (3, 5), (6, 10)])
        before = unit.break_points
        validate_config(make_config(unit))
        assert unit.break_points == before


class TestLoadGradingConfig:
    """YAML loading"""

    def test_load_full_config(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text(GRADING_YML)

        config = load_grading_config(path)

        assert [u.name for u in config.graded_units] == ["createConversationArea", "leaveConversationArea"]
        first = config.graded_units[0]
        assert first.break_points[1] == BreakPoint(minimum_mutants_detected=3, points_to_award=5)
        assert first.locations == (
            "src/lib/CoveyTownController.ts:120-148",
            "src/lib/CoveyTownController.ts:200",
        )
        assert config.graded_units[1].max_score == 4.5
        assert config.submission_files[0].dest == "src/client/CoveyTownConversationAPI.test.ts"
        assert config.expected_ts_ignore == 0
        assert config.expected_eslint_ignore == 2

    def test_optional_fields_default(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text("gradedUnits: []\n")
        config = load_grading_config(path)
        assert config.graded_units == ()
        assert config.submission_files == ()
        assert config.expected_ts_ignore == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_grading_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text("gradedUnits: [\n")
        with pytest.raises(ConfigError):
            load_grading_config(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text("")
        with pytest.raises(ConfigError):
            load_grading_config(path)

    def test_missing_break_points_key(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text("gradedUnits:\n  - name: U\n    locations: ['a.ts:1']\n")
        with pytest.raises(ConfigError) as excinfo:
            load_grading_config(path)
        assert "breakPoints" in str(excinfo.value)

    def test_negative_threshold_rejected(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text(
            "gradedUnits:\n"
            "  - name: U\n"
            "    breakPoints: [{minimumMutantsDetected: -1, pointsToAward: 1}]\n"
            "    locations: ['a.ts:1']\n"
        )
        with pytest.raises(ConfigError):
            load_grading_config(path)

    def test_round_trip_dict(self, tmp_path):
        path = tmp_path / "grading.yml"
        path.write_text(GRADING_YML)
        config = load_grading_config(path)
        assert GradingConfig.from_dict(config.to_dict()) == config


def test_get_unit():
    config = make_config(make_unit("A", [(0, 1)]), make_unit("B", [(0, 2)]))
    assert config.get_unit("B").max_score == 2
    with pytest.raises(KeyError):
        config.get_unit("C")


def test_target_mutants_is_last_declared_threshold():
    unit = make_unit("U", [(0, 0), (3, 5), (6, 10)])
    assert unit.target_mutants == 6


def test_max_score_of_empty_unit_raises_config_error():
    unit = make_unit("Empty", [])
    with pytest.raises(InvalidBreakpointOrdering):
        unit.max_score
    with pytest.raises(InvalidBreakpointOrdering):
        unit.target_mutants
