from .eligible_staff_filter import EligibleStaffFilter
from .exclude_blank_name_filter import ExcludeBlankNameFilter

__all__ = [
    'EligibleStaffFilter',
    'ExcludeBlankNameFilter'
]
