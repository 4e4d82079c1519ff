from dataclasses import dataclass, field

from proshifters.data.schedule_grid import Row, ScheduleGrid


@dataclass(frozen=True)
class Person:
    name: str
    # Shared with every other person, rows are read in place rather than copied
    grid: ScheduleGrid = field(repr=False, compare=False)
    row_index: int

    @property
    def row(self) -> Row:
        return self.grid.rows[self.row_index]
