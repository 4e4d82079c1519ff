from collections.abc import Mapping
from typing import Dict, Iterator, List, Sequence


class ShiftTally(Mapping):
    """Shift code counts for one person in one month, keyed in report column order."""

    def __init__(self, counts: Dict[str, int], codes: Sequence[str]):
        self.__counts = {code: counts.get(code, 0) for code in codes}

    def __getitem__(self, code: str) -> int:
        return self.__counts[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__counts)

    def __len__(self) -> int:
        return len(self.__counts)

    def values_in_order(self) -> List[int]:
        return list(self.__counts.values())

    def shift_total(self, weekend_code: str) -> int:
        return sum(count for code, count in self.__counts.items() if code != weekend_code)

    def __repr__(self):
        return f"ShiftTally({self.__counts})"
