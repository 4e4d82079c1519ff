from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Sequence

from proshifters.common.defaults import NAME_HEADER
from proshifters.core.processors.shift_tally_calculator import ShiftTallyCalculator
from proshifters.data.month import Month
from proshifters.data.person import Person


@dataclass(frozen=True)
class MonthSpan:
    """Where a month's block of shift columns sits in the report."""
    name: str
    first_column: int
    width: int

    @property
    def last_column(self) -> int:
        return self.first_column + self.width - 1


@dataclass(frozen=True)
class ReportGrid:
    month_row: List[Any]
    shift_row: List[Any]
    data_rows: List[List[Any]] = field(default_factory=list)
    month_spans: List[MonthSpan] = field(default_factory=list)

    @property
    def header_row_count(self) -> int:
        return 2

    def rows(self) -> Iterator[List[Any]]:
        yield self.month_row
        yield self.shift_row
        yield from self.data_rows


class ShiftReportAssembler:
    """
    Lays out the shift count report.

    Column 0 holds names. Each month then takes one column per shift code, in the
    calculator's code order, with the month name in the first column of its block.
    """

    def __init__(self, calculator: ShiftTallyCalculator):
        self.__calculator = calculator

    def assemble(self, months: Sequence[Month], people: Sequence[Person]) -> ReportGrid:
        shift_codes = list(self.__calculator.shift_codes)
        block_width = len(shift_codes)

        month_row: List[Any] = [""]
        shift_row: List[Any] = [NAME_HEADER]
        month_spans: List[MonthSpan] = []
        for month in months:
            month_spans.append(MonthSpan(month.name, len(month_row), block_width))
            month_row.append(month.name)
            month_row.extend([""] * (block_width - 1))
            shift_row.extend(shift_codes)

        data_rows = [self.__person_row(person, months) for person in people]
        return ReportGrid(month_row, shift_row, data_rows, month_spans)

    def __person_row(self, person: Person, months: Sequence[Month]) -> List[Any]:
        row: List[Any] = [person.name]
        for month in months:
            row.extend(self.__calculator.tally(person, month).values_in_order())
        return row
