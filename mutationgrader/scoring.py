"""
Scoring Engine

Turns a mutation report into per-unit grades.

For each graded unit:
  detected = number of unit mutants with status "Killed"
  score    = points of the highest break point whose threshold <= detected (else 0)
  max      = highest points_to_award of the unit

Mutants that survived, were not covered, timed out or errored never count as
detected.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
import logging

from mutationgrader.classifier import unit_mutants
from mutationgrader.config import (
    DEFAULT_STDOUT_VISIBILITY,
    FAILURE_STDOUT_VISIBILITY,
    KILLED_STATUS,
    STDOUT_VISIBILITIES,
    SUMMARY_TEMPLATE,
)
from mutationgrader.grading_config import BreakPoint, GradedUnit, GradingConfig, validate_config
from mutationgrader.mutation_report import MutationTestResult


logger = logging.getLogger(__name__)


@dataclass
class TestResult:
    """Grade for one graded unit."""
    score: float
    max_score: float
    name: str
    output: str

    __test__ = False  # not a pytest class

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "name": self.name,
            "output": self.output,
        }


@dataclass
class GraderOutput:
    """Complete score report handed to the grading platform."""
    stdout_visibility: str = DEFAULT_STDOUT_VISIBILITY
    output: Optional[str] = None
    tests: Optional[List[TestResult]] = None
    score: Optional[float] = None

    def __post_init__(self):
        if self.stdout_visibility not in STDOUT_VISIBILITIES:
            raise ValueError(f"Unknown stdout_visibility: {self.stdout_visibility}")

    @property
    def total_score(self) -> float:
        if self.score is not None:
            return self.score
        return sum(t.score for t in self.tests or [])

    @property
    def total_max_score(self) -> float:
        return sum(t.max_score for t in self.tests or [])

    @classmethod
    def failure(cls, message: str) -> "GraderOutput":
        """Report for a run that could not be graded: visible, score 0."""
        return cls(stdout_visibility=FAILURE_STDOUT_VISIBILITY, output=message, score=0)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization (unset fields omitted)."""
        result: Dict = {"stdout_visibility": self.stdout_visibility}
        if self.output is not None:
            result["output"] = self.output
        if self.tests is not None:
            result["tests"] = [t.to_dict() for t in self.tests]
        if self.score is not None:
            result["score"] = self.score
        return result


def count_detected_mutants(unit: GradedUnit, report: MutationTestResult) -> int:
    """Number of mutants attributed to the unit that the tests killed."""
    ranges = unit.location_ranges
    matched = 0
    detected = 0
    for _, mutant in unit_mutants(report, ranges):
        matched += 1
        if mutant.status == KILLED_STATUS:
            detected += 1
    logger.debug(f"Unit {unit.name}: {detected} killed of {matched} attributed mutant(s)")
    return detected


def resolve_break_point(break_points: Sequence[BreakPoint], detected: int) -> float:
    """
    Points awarded for a detected count.

    Scans from the highest threshold down and returns the points of the first
    break point whose threshold is <= detected, or 0 if none qualifies.
    Break points must already be strictly ascending (see validate_config).
    """
    for break_point in reversed(break_points):
        if break_point.minimum_mutants_detected <= detected:
            return break_point.points_to_award
    return 0


def grade_mutation_unit(unit: GradedUnit, report: MutationTestResult) -> TestResult:
    """
    Grade one unit against the mutation report.

    Args:
        unit: Graded unit with a non-empty, ascending break point table
        report: Mutation report for the whole submission

    Returns:
        TestResult with the awarded score and a "Faults detected: n/target" summary
    """
    detected = count_detected_mutants(unit, report)
    score = resolve_break_point(unit.break_points, detected)

    result = TestResult(
        score=score,
        max_score=unit.max_score,
        name=unit.name,
        output=SUMMARY_TEMPLATE.format(detected=detected, target=unit.target_mutants),
    )
    logger.info(f"{unit.name}: {result.score}/{result.max_score} ({result.output})")
    return result


def grade_results(config: GradingConfig, report: MutationTestResult) -> GraderOutput:
    """
    Grade every unit of the configuration, in declared order.

    The configuration is validated first, so an invalid configuration raises
    before any unit is graded and never yields a partial report.

    Raises:
        InvalidBreakpointOrdering, UnsupportedLocationFormat
    """
    validate_config(config)

    tests = [grade_mutation_unit(unit, report) for unit in config.graded_units]
    output = GraderOutput(output="", stdout_visibility=DEFAULT_STDOUT_VISIBILITY, tests=tests)

    logger.info(f"Graded {len(tests)} unit(s): {output.total_score}/{output.total_max_score}")
    return output
