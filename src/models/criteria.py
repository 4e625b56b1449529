"""Filter and sort configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass

SORT_DIRECTIONS = ('asc', 'desc')


@dataclass(frozen=True)
class DateRange:
    """Inclusive interval of epoch-millisecond timestamps."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f'DateRange start {self.start} is after end {self.end}.')

    def contains(self, timestamp_ms: int) -> bool:
        return self.start <= timestamp_ms <= self.end


@dataclass(frozen=True)
class FilterCriteria:
    """Facet constraints; an empty or unset facet does not constrain."""

    product: str | None = None
    entity: str | None = None
    repayment_type: str | None = None
    date_range: DateRange | None = None


@dataclass(frozen=True)
class SortSpec:
    """Sort key and direction for the repayment table."""

    key: str = 'date'
    direction: str = 'asc'

    def __post_init__(self) -> None:
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(f'Sort direction must be one of {SORT_DIRECTIONS}, got {self.direction!r}.')

    @property
    def descending(self) -> bool:
        return self.direction == 'desc'

    def toggled(self, key: str) -> SortSpec:
        """Return the spec after a header click on ``key``.

        Clicking the active ascending column flips it to descending; any
        other click sorts ``key`` ascending.
        """
        if key == self.key and self.direction == 'asc':
            return SortSpec(key=key, direction='desc')
        return SortSpec(key=key, direction='asc')
