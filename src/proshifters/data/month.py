from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Month:
    name: str
    start_column: int
    days: Tuple[str, ...]

    @property
    def end_column(self) -> int:
        """Column index one past the last day of the month."""
        return self.start_column + len(self.days)

    def day_at(self, column: int) -> str:
        return self.days[column - self.start_column]
