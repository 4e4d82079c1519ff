from proshifters.data.staff_row import StaffRow
from proshifters.interfaces.filter import Filter


class ExcludeBlankNameFilter(Filter[StaffRow]):
    def __init__(self):
        super().__init__()

    def filter(self, data: StaffRow) -> bool:
        if not data.name.strip():
            return False
        return True
