from proshifters.common.utils import print_summary
from proshifters.core.filters import EligibleStaffFilter, ExcludeBlankNameFilter


class FilterManager:
    def __init__(self):
        self.exclude_blank_name_filter = ExcludeBlankNameFilter()
        self.eligible_staff_filter = EligibleStaffFilter()

    def get_rejected_counts(self) -> dict:
        return {
            "Rows without a name": self.exclude_blank_name_filter.get_rejected_count(),
            "Rows not flagged for shift counts": self.eligible_staff_filter.get_rejected_count(),
        }

    def display_summary(self):
        print_summary("Rows skipped", self.get_rejected_counts(), detail=True)
