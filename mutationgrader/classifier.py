"""Mutant classification

Decides which report files and mutants count toward a graded unit. A mutant
may count toward any number of units; each unit is classified independently.
"""

from typing import Iterator, Sequence, Tuple

from mutationgrader.locations import LocationRange
from mutationgrader.mutation_report import MutantResult, MutationTestResult


def file_belongs_to_unit(file_path: str, ranges: Sequence[LocationRange]) -> bool:
    """
    True if the report path contains the file name of any range.

    Substring containment, not equality: report paths carry workspace prefixes
    (``src/lib/Foo.ts`` vs ``/home/runner/work/.../src/lib/Foo.ts``) that the
    configuration does not know about.
    """
    return any(r.file_name in file_path for r in ranges)


def mutant_belongs_to_unit(mutant: MutantResult, ranges: Sequence[LocationRange]) -> bool:
    """True if the mutant's start line falls inside any range (bounds inclusive)"""
    return any(r.contains_line(mutant.line) for r in ranges)


def unit_mutants(
    report: MutationTestResult, ranges: Sequence[LocationRange]
) -> Iterator[Tuple[str, MutantResult]]:
    """Yield (file_path, mutant) for every mutant attributed to the ranges"""
    for file_path, file_result in report.files.items():
        if not file_belongs_to_unit(file_path, ranges):
            continue
        for mutant in file_result.mutants:
            if mutant_belongs_to_unit(mutant, ranges):
                yield file_path, mutant
