from proshifters.core.processors import PersonProcessor, ShiftTallyCalculator


class ProcessorManager:
    def __init__(self):
        self.person_processor = PersonProcessor()
        self.shift_tally_calculator = ShiftTallyCalculator()
