"""
MutationGrader

Grades a student-submitted test suite from the mutation-testing report of an
instructor-provided implementation. Each graded unit names source locations;
mutants at those locations that the submitted tests killed are counted and
mapped to points through the unit's break point table.

Entry points: validate_config(config) and grade_results(config, report).
"""

__version__ = "1.0.0"

from .exceptions import (
    GradingError,
    ConfigError,
    UnsupportedLocationFormat,
    InvalidBreakpointOrdering,
    ReportError,
)
from .locations import LocationRange, parse_location
from .grading_config import (
    BreakPoint,
    GradedUnit,
    SubmissionFile,
    GradingConfig,
    load_grading_config,
    validate_config,
)
from .mutation_report import MutantResult, MutationTestResult, load_mutation_report
from .classifier import file_belongs_to_unit, mutant_belongs_to_unit
from .scoring import TestResult, GraderOutput, grade_mutation_unit, grade_results

__all__ = [
    # Errors
    "GradingError",
    "ConfigError",
    "UnsupportedLocationFormat",
    "InvalidBreakpointOrdering",
    "ReportError",

    # Locations
    "LocationRange",
    "parse_location",

    # Config
    "BreakPoint",
    "GradedUnit",
    "SubmissionFile",
    "GradingConfig",
    "load_grading_config",
    "validate_config",

    # Report
    "MutantResult",
    "MutationTestResult",
    "load_mutation_report",

    # Classification
    "file_belongs_to_unit",
    "mutant_belongs_to_unit",

    # Scoring
    "TestResult",
    "GraderOutput",
    "grade_mutation_unit",
    "grade_results",
]
