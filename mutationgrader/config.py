"""Configuration for MutationGrader"""

from pathlib import Path
from typing import Dict, Any

# Default paths, relative to the grading workspace
DEFAULT_CONFIG_FILE = Path("grading.yml")
IMPLEMENTATION_DIR = Path("implementation-to-test")
DEFAULT_REPORT_FILE = IMPLEMENTATION_DIR / "reports" / "mutation" / "mutation.json"

# ===========================================
# Mutant Statuses
# ===========================================
# Only a mutant that the submitted tests actually killed counts as detected.

KILLED_STATUS = "Killed"

MUTANT_STATUSES = (
    "Killed",
    "Survived",
    "NoCoverage",
    "CompileError",
    "RuntimeError",
    "Timeout",
    "Ignored",
    "Pending",
)

# ===========================================
# Score Report
# ===========================================

STDOUT_VISIBILITIES = ("hidden", "after_due_date", "after_published", "visible")

DEFAULT_STDOUT_VISIBILITY = "hidden"
FAILURE_STDOUT_VISIBILITY = "visible"

SUMMARY_TEMPLATE = "Faults detected: {detected}/{target}"

# ===========================================
# Input Schemas
# ===========================================
# Structural checks only. Ordering rules are enforced by validate_config.

GRADING_CONFIG_SCHEMA = {
    "type": "object",
    "required": ["gradedUnits"],
    "properties": {
        "gradedUnits": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "breakPoints", "locations"],
                "properties": {
                    "name": {"type": "string"},
                    "breakPoints": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["minimumMutantsDetected", "pointsToAward"],
                            "properties": {
                                "minimumMutantsDetected": {"type": "integer", "minimum": 0},
                                "pointsToAward": {"type": "number", "minimum": 0},
                            },
                        },
                    },
                    "locations": {
                        "type": "array",
                        "items": {"type": "string"},
                    },
                },
            },
        },
        "submissionFiles": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "dest"],
                "properties": {
                    "name": {"type": "string"},
                    "dest": {"type": "string"},
                },
            },
        },
        "expectedTSIgnore": {"type": "integer", "minimum": 0},
        "expectedESlintIgnore": {"type": "integer", "minimum": 0},
    },
}

_POSITION_SCHEMA = {
    "type": "object",
    "required": ["line"],
    "properties": {
        "line": {"type": "integer"},
        "column": {"type": "integer"},
    },
}

MUTATION_REPORT_SCHEMA = {
    "type": "object",
    "required": ["files"],
    "properties": {
        "files": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "required": ["mutants"],
                "properties": {
                    "mutants": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["status", "location"],
                            "properties": {
                                "id": {"type": ["string", "integer"]},
                                "mutatorName": {"type": "string"},
                                "replacement": {"type": "string"},
                                "status": {"type": "string"},
                                "location": {
                                    "type": "object",
                                    "required": ["start"],
                                    "properties": {
                                        "start": _POSITION_SCHEMA,
                                        "end": _POSITION_SCHEMA,
                                    },
                                },
                            },
                        },
                    },
                },
            },
        },
    },
}


def get_config() -> Dict[str, Any]:
    """Get full configuration dictionary"""
    return {
        "default_config_file": str(DEFAULT_CONFIG_FILE),
        "implementation_dir": str(IMPLEMENTATION_DIR),
        "default_report_file": str(DEFAULT_REPORT_FILE),
        "killed_status": KILLED_STATUS,
        "mutant_statuses": list(MUTANT_STATUSES),
        "stdout_visibilities": list(STDOUT_VISIBILITIES),
        "default_stdout_visibility": DEFAULT_STDOUT_VISIBILITY,
        "failure_stdout_visibility": FAILURE_STDOUT_VISIBILITY,
    }
