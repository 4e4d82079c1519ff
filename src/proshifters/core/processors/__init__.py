from .person_processor import PersonProcessor
from .shift_tally_calculator import ShiftTallyCalculator

__all__ = [
    'PersonProcessor',
    'ShiftTallyCalculator'
]
