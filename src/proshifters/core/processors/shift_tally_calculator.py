from collections import Counter
from typing import Dict, Iterator, Sequence, Tuple

from proshifters.common.defaults import VALID_SHIFT_NAMES, WEEKEND_DAY_MARKER, WEEKEND_SHIFT_NAME
from proshifters.common.shift_codes import classify_shift_code
from proshifters.data.month import Month
from proshifters.data.person import Person
from proshifters.data.schedule_grid import Row, ScheduleGrid
from proshifters.data.shift_tally import ShiftTally


class ShiftTallyCalculator:
    """
    Counts the shifts a person worked in a month.

    Each day cell is normalized and matched against the shift codes; unrecognized
    cells are skipped. A matched shift on a day labelled "S" also counts towards
    the weekend code. Tallies are cached per (person row, month).
    """

    def __init__(self, shift_codes: Sequence[str] = VALID_SHIFT_NAMES, weekend_code: str = WEEKEND_SHIFT_NAME):
        self.__shift_codes = tuple(shift_codes)
        self.__weekend_code = weekend_code
        self.__cache: Dict[Tuple[ScheduleGrid, int, Month], ShiftTally] = {}

    @property
    def shift_codes(self) -> Tuple[str, ...]:
        return self.__shift_codes

    @property
    def weekend_code(self) -> str:
        return self.__weekend_code

    def tally(self, person: Person, month: Month) -> ShiftTally:
        key = (person.grid, person.row_index, month)
        tally = self.__cache.get(key)
        if tally is None:
            tally = self.tally_row(person.row, month)
            self.__cache[key] = tally
        return tally

    def tally_row(self, row: Row, month: Month) -> ShiftTally:
        counts = Counter(self.__worked_shifts(row, month))
        return ShiftTally(counts, self.__shift_codes)

    def __worked_shifts(self, row: Row, month: Month) -> Iterator[str]:
        for col_idx in range(month.start_column, month.end_column):
            # Short row, nothing recorded past this point
            if col_idx >= len(row):
                return

            match = classify_shift_code(row[col_idx], self.__shift_codes)
            if not match.matched:
                continue

            yield match.code
            if month.day_at(col_idx) == WEEKEND_DAY_MARKER:
                yield self.__weekend_code
