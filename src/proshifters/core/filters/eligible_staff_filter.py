from proshifters.common.defaults import ELIGIBLE_FLAG
from proshifters.data.staff_row import StaffRow
from proshifters.interfaces.filter import Filter


class EligibleStaffFilter(Filter[StaffRow]):
    def __init__(self, eligible_flag: str = ELIGIBLE_FLAG):
        super().__init__()
        self.__eligible_flag = eligible_flag

    def filter(self, data: StaffRow) -> bool:
        return data.eligible_flag.strip().upper() == self.__eligible_flag
