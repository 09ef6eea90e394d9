"""Grading configuration: model, loading and validation

The configuration is authored as YAML (``grading.yml``)::

    gradedUnits:
      - name: createConversationArea
        breakPoints:
          - {minimumMutantsDetected: 0, pointsToAward: 0}
          - {minimumMutantsDetected: 3, pointsToAward: 5}
          - {minimumMutantsDetected: 6, pointsToAward: 10}
        locations:
          - src/lib/CoveyTownController.ts:120-148
    submissionFiles:
      - {name: CoveyTownConversationAPI.test.ts, dest: src/client/CoveyTownConversationAPI.test.ts}
    expectedTSIgnore: 0
    expectedESlintIgnore: 2
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple, Union
import logging

import jsonschema
import yaml

from mutationgrader.config import GRADING_CONFIG_SCHEMA
from mutationgrader.exceptions import ConfigError, InvalidBreakpointOrdering
from mutationgrader.locations import LocationRange, parse_locations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreakPoint:
    """Award at least points_to_award once this many unit mutants are killed"""
    minimum_mutants_detected: int
    points_to_award: float

    def to_dict(self) -> Dict:
        return {
            "minimumMutantsDetected": self.minimum_mutants_detected,
            "pointsToAward": self.points_to_award,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "BreakPoint":
        return cls(
            minimum_mutants_detected=data["minimumMutantsDetected"],
            points_to_award=data["pointsToAward"],
        )


@dataclass(frozen=True)
class GradedUnit:
    """One named gradable concept and the source regions that count toward it"""
    name: str
    break_points: Tuple[BreakPoint, ...]
    locations: Tuple[str, ...]

    @property
    def location_ranges(self) -> Tuple[LocationRange, ...]:
        """Parsed locations (raises UnsupportedLocationFormat)"""
        return parse_locations(self.locations)

    def _require_break_points(self):
        if not self.break_points:
            raise InvalidBreakpointOrdering(
                self.name,
                f"Error in config for gradedUnit {self.name}, at least one break point is required",
            )

    @property
    def max_score(self) -> float:
        self._require_break_points()
        return max(bp.points_to_award for bp in self.break_points)

    @property
    def target_mutants(self) -> int:
        """Threshold of the last declared break point, the nominal full-marks count"""
        self._require_break_points()
        return self.break_points[-1].minimum_mutants_detected

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "breakPoints": [bp.to_dict() for bp in self.break_points],
            "locations": list(self.locations),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "GradedUnit":
        return cls(
            name=data["name"],
            break_points=tuple(BreakPoint.from_dict(bp) for bp in data["breakPoints"]),
            locations=tuple(data["locations"]),
        )


@dataclass(frozen=True)
class SubmissionFile:
    """Where a submitted file is copied in the workspace (used by the runner, not the grader)"""
    name: str
    dest: str


@dataclass(frozen=True)
class GradingConfig:
    """Full grading configuration, immutable for the duration of a run"""
    graded_units: Tuple[GradedUnit, ...]
    submission_files: Tuple[SubmissionFile, ...] = field(default_factory=tuple)
    expected_ts_ignore: int = 0
    expected_eslint_ignore: int = 0

    def get_unit(self, name: str) -> GradedUnit:
        for unit in self.graded_units:
            if unit.name == name:
                return unit
        raise KeyError(f"No graded unit named {name}")

    def to_dict(self) -> Dict:
        return {
            "gradedUnits": [unit.to_dict() for unit in self.graded_units],
            "submissionFiles": [{"name": f.name, "dest": f.dest} for f in self.submission_files],
            "expectedTSIgnore": self.expected_ts_ignore,
            "expectedESlintIgnore": self.expected_eslint_ignore,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "GradingConfig":
        """
        Build a config from its parsed YAML/JSON form.

        Only the structure is checked here; call validate_config() before grading.

        Raises:
            ConfigError: data does not match GRADING_CONFIG_SCHEMA
        """
        try:
            jsonschema.validate(instance=data, schema=GRADING_CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            path = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigError(f"Invalid grading config at {path}: {e.message}") from e

        return cls(
            graded_units=tuple(GradedUnit.from_dict(u) for u in data["gradedUnits"]),
            submission_files=tuple(
                SubmissionFile(name=f["name"], dest=f["dest"])
                for f in data.get("submissionFiles", [])
            ),
            expected_ts_ignore=data.get("expectedTSIgnore", 0),
            expected_eslint_ignore=data.get("expectedESlintIgnore", 0),
        )


def load_grading_config(path: Union[str, Path]) -> GradingConfig:
    """
    Load a grading configuration from a YAML file.

    Args:
        path: Path to grading.yml

    Returns:
        GradingConfig (structurally checked, not yet validated)

    Raises:
        ConfigError: file missing, not YAML, or structurally invalid
    """
    config_path = Path(path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read grading config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Grading config {config_path} is not valid YAML: {e}") from e

    config = GradingConfig.from_dict(data)
    logger.info(f"Loaded grading config {config_path} with {len(config.graded_units)} graded unit(s)")
    return config


def validate_config(config: GradingConfig) -> None:
    """
    Check the configuration before any grading work begins.

    Every unit must have at least one break point, its break points must be
    strictly ascending by minimum_mutants_detected in declared order, and
    every location must parse.

    Raises:
        InvalidBreakpointOrdering: empty, duplicate or out-of-order break points
        UnsupportedLocationFormat: a location string cannot be parsed
    """
    for unit in config.graded_units:
        unit._require_break_points()

        last_threshold = -1
        for break_point in unit.break_points:
            if break_point.minimum_mutants_detected <= last_threshold:
                logger.error(
                    f"Unit {unit.name}: threshold {break_point.minimum_mutants_detected} "
                    f"follows {last_threshold}"
                )
                raise InvalidBreakpointOrdering(unit.name)
            last_threshold = break_point.minimum_mutants_detected

        # Parsed here so a bad location aborts the run before any unit is graded
        parse_locations(unit.locations)

    logger.debug(f"Grading config valid ({len(config.graded_units)} units)")


def unit_names(config: GradingConfig) -> List[str]:
    return [unit.name for unit in config.graded_units]
