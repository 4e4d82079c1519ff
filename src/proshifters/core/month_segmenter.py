from typing import List, Optional, Sequence

from proshifters.common.defaults import FIRST_DAY_MARKER
from proshifters.data.month import Month
from proshifters.data.schedule_grid import ScheduleGrid


class MonthSegmenter:
    """
    Splits the schedule columns into month blocks using the day-number header row.

    A day number of "1" starts a new month and a blank day number ends the days
    seen so far. A month still open when the row runs out has no terminator; it is
    dropped unless close_trailing_month is set, and either way it is reported
    through dropped_trailing_month.
    """

    def __init__(self, close_trailing_month: bool = False):
        self.__close_trailing_month = close_trailing_month
        self.__dropped_trailing_month: Optional[Month] = None

    @property
    def dropped_trailing_month(self) -> Optional[Month]:
        return self.__dropped_trailing_month

    def segment(self, day_number_row: Sequence[str], day_name_row: Sequence[str],
                month_name_row: Sequence[str]) -> List[Month]:
        self.__dropped_trailing_month = None
        months: List[Month] = []
        month_start: Optional[int] = None

        for col_idx, value in enumerate(day_number_row):
            cell = value.strip()
            if cell not in ('', FIRST_DAY_MARKER):
                continue

            if month_start is not None:
                months.append(self.__build_month(month_start, col_idx, day_name_row, month_name_row))

            # Blank day number: no month in progress until the next day 1
            month_start = col_idx if cell == FIRST_DAY_MARKER else None

        if month_start is not None:
            trailing = self.__build_month(month_start, len(day_number_row), day_name_row, month_name_row)
            if self.__close_trailing_month:
                months.append(trailing)
            else:
                self.__dropped_trailing_month = trailing

        return months

    def segment_grid(self, grid: ScheduleGrid) -> List[Month]:
        return self.segment(grid.day_number_row, grid.day_name_row, grid.month_name_row)

    @staticmethod
    def __build_month(start: int, end: int, day_name_row: Sequence[str],
                      month_name_row: Sequence[str]) -> Month:
        name = month_name_row[start] if start < len(month_name_row) else ''
        days = tuple(label.strip().upper() for label in day_name_row[start:end])
        # A short day-name row leaves the remaining days unlabelled
        days += ('',) * (end - start - len(days))
        return Month(name, start, days)
