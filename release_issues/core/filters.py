"""Label filter criteria for the release issue query.

The criteria come straight from the command line. They are turned into two
label lists for GitLab: labels an issue must carry and labels it must not.
"""

from __future__ import annotations

from dataclasses import dataclass

from .result import Err, Ok, Result

__all__ = [
    "READY_FOR_TEST_LABEL",
    "FilterCriteria",
    "FilterError",
    "LabelSets",
    "build_label_sets",
]

READY_FOR_TEST_LABEL = "READY-FOR-TEST"


@dataclass(frozen=True, slots=True)
class FilterError:
    """Invalid combination of filter flags."""

    message: str


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """What the user asked to see.

    Attributes:
        release: Release label, empty when not filtering by release
        ready_for_test: Only show issues labelled READY-FOR-TEST
        blocker: Blocker label (staging-upgrade, production-upgrade), or empty
    """

    release: str = ""
    ready_for_test: bool = False
    blocker: str = ""

    def validate(self) -> Result[FilterCriteria, FilterError]:
        if self.ready_for_test and not self.release:
            return Err(FilterError("Release label is required when filtering by READY-FOR-TEST"))
        return Ok(self)


@dataclass(frozen=True, slots=True)
class LabelSets:
    """Labels passed to the issue list call."""

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()


def build_label_sets(criteria: FilterCriteria) -> LabelSets:
    """Build include/exclude label lists from criteria.

    Include order is release, READY-FOR-TEST, blocker. Without the
    ready-for-test flag, READY-FOR-TEST issues are excluded instead.
    """
    include: list[str] = []
    exclude: list[str] = []

    if criteria.release:
        include.append(criteria.release)

    if criteria.ready_for_test:
        include.append(READY_FOR_TEST_LABEL)
    else:
        exclude.append(READY_FOR_TEST_LABEL)

    if criteria.blocker:
        include.append(criteria.blocker)

    return LabelSets(include=tuple(include), exclude=tuple(exclude))
