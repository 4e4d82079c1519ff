from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from proshifters.common.defaults import (DAY_NAME_ROW, DAY_NUMBER_ROW, HEADER_ROW_COUNT, MONTH_NAME_ROW,
                                         NAME_COLUMN_WIDTH)
from proshifters.common.errors import ScheduleFormatError

Row = Tuple[str, ...]


@dataclass(frozen=True, eq=False)
class ScheduleGrid:
    """
    Read-only text grid of the schedule sheet.

    Row 0 holds month names, row 1 day-type labels, row 2 day numbers and every
    following row belongs to one staff member. Rows may differ in length.
    """
    rows: Tuple[Row, ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> 'ScheduleGrid':
        return cls(tuple(tuple('' if cell is None else str(cell) for cell in row) for row in rows))

    def validate(self) -> 'ScheduleGrid':
        if len(self.rows) < HEADER_ROW_COUNT:
            raise ScheduleFormatError(
                f"Schedule needs {HEADER_ROW_COUNT} header rows (months, day names, day numbers), "
                f"found {len(self.rows)}")
        width = max(len(row) for row in self.rows)
        if width < NAME_COLUMN_WIDTH:
            raise ScheduleFormatError(
                f"Schedule needs at least {NAME_COLUMN_WIDTH} metadata columns, found {width}")
        return self

    @property
    def month_name_row(self) -> Row:
        return self.rows[MONTH_NAME_ROW]

    @property
    def day_name_row(self) -> Row:
        return self.rows[DAY_NAME_ROW]

    @property
    def day_number_row(self) -> Row:
        return self.rows[DAY_NUMBER_ROW]

    def staff_row_indexes(self) -> Iterator[int]:
        return iter(range(HEADER_ROW_COUNT, len(self.rows)))

    def __len__(self):
        return len(self.rows)
