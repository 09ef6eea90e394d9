"""Mutation report model

Reads the JSON report written by the mutation-testing tool
(``reports/mutation/mutation.json``). Only the parts the grader needs are
modelled; everything else in the report is ignored.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union
import json
import logging

import jsonschema

from mutationgrader.config import MUTATION_REPORT_SCHEMA, MUTANT_STATUSES
from mutationgrader.exceptions import ReportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    line: int
    column: int = 0


@dataclass(frozen=True)
class Location:
    start: Position
    end: Optional[Position] = None


@dataclass(frozen=True)
class MutantResult:
    """A single mutant as reported by the mutation tool"""
    status: str  # "Killed", "Survived", "NoCoverage", "Timeout", ...
    location: Location
    id: Optional[str] = None
    mutator_name: Optional[str] = None
    replacement: Optional[str] = None

    @property
    def line(self) -> int:
        """Start line; multi-line mutants are attributed by their first line"""
        return self.location.start.line

    @classmethod
    def from_dict(cls, data: Dict) -> "MutantResult":
        loc = data["location"]
        end = loc.get("end")
        mutant_id = data.get("id")
        return cls(
            status=data["status"],
            location=Location(
                start=Position(loc["start"]["line"], loc["start"].get("column", 0)),
                end=Position(end["line"], end.get("column", 0)) if end else None,
            ),
            id=str(mutant_id) if mutant_id is not None else None,
            mutator_name=data.get("mutatorName"),
            replacement=data.get("replacement"),
        )


@dataclass(frozen=True)
class FileResult:
    mutants: Tuple[MutantResult, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MutationTestResult:
    """Mapping of report file path to that file's mutants"""
    files: Dict[str, FileResult]

    def iter_mutants(self) -> Iterator[Tuple[str, MutantResult]]:
        for path, file_result in self.files.items():
            for mutant in file_result.mutants:
                yield path, mutant

    def status_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for _, mutant in self.iter_mutants():
            counts[mutant.status] = counts.get(mutant.status, 0) + 1
        return counts

    @classmethod
    def from_dict(cls, data: Dict) -> "MutationTestResult":
        """
        Build a report from its parsed JSON form.

        Raises:
            ReportError: data does not match MUTATION_REPORT_SCHEMA
        """
        try:
            jsonschema.validate(instance=data, schema=MUTATION_REPORT_SCHEMA)
        except jsonschema.ValidationError as e:
            path = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ReportError(f"Invalid mutation report at {path}: {e.message}") from e

        files = {
            path: FileResult(mutants=tuple(MutantResult.from_dict(m) for m in file_data["mutants"]))
            for path, file_data in data["files"].items()
        }
        report = cls(files=files)

        unknown = set(report.status_counts()) - set(MUTANT_STATUSES)
        if unknown:
            # Still gradeable: anything other than Killed never counts as detected
            logger.warning(f"Unrecognised mutant status(es) in report: {sorted(unknown)}")
        return report


def load_mutation_report(path: Union[str, Path]) -> MutationTestResult:
    """
    Load a mutation report from a JSON file.

    Raises:
        ReportError: file missing, not JSON, or structurally invalid
    """
    report_path = Path(path)
    try:
        with open(report_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ReportError(f"Could not read mutation report {report_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ReportError(f"Mutation report {report_path} is not valid JSON: {e}") from e

    report = MutationTestResult.from_dict(data)
    total = sum(len(f.mutants) for f in report.files.values())
    logger.info(f"Loaded mutation report {report_path}: {len(report.files)} file(s), {total} mutant(s)")
    return report
