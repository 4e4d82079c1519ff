from dataclasses import dataclass

from proshifters.common.defaults import ELIGIBLE_COLUMN_WIDTH, NAME_COLUMN_WIDTH
from proshifters.data.person import Person
from proshifters.data.schedule_grid import Row, ScheduleGrid


def _last_of_leading(row: Row, width: int) -> str:
    leading = row[:width]
    return leading[-1] if leading else ''


@dataclass(frozen=True)
class StaffRow:
    """One non-header row of the schedule on its way through the person filters."""
    grid: ScheduleGrid
    row_index: int

    @property
    def row(self) -> Row:
        return self.grid.rows[self.row_index]

    @property
    def name(self) -> str:
        return _last_of_leading(self.row, NAME_COLUMN_WIDTH)

    @property
    def eligible_flag(self) -> str:
        return _last_of_leading(self.row, ELIGIBLE_COLUMN_WIDTH)

    def to_person(self) -> Person:
        return Person(self.name, self.grid, self.row_index)
