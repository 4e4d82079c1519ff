from typing import List

from proshifters.core.month_segmenter import MonthSegmenter
from proshifters.data.month import Month
from proshifters.data.person import Person
from proshifters.data.schedule_grid import ScheduleGrid
from proshifters.data.staff_row import StaffRow
from proshifters.processing.pipeline_manager import PipelineManager


class PipelineProcessor:
    def __init__(self, grid: ScheduleGrid, pipeline_manager: PipelineManager, month_segmenter: MonthSegmenter):
        self.__grid = grid
        self.__pipeline_manager = pipeline_manager
        self.__month_segmenter = month_segmenter
        self.__months: List[Month] = []

    def process_data(self):
        self.__months = self.__month_segmenter.segment_grid(self.__grid)

        pipeline = self.__pipeline_manager.get_pipeline()
        for row_index in self.__grid.staff_row_indexes():
            pipeline.handle(StaffRow(self.__grid, row_index))

    def get_months(self) -> List[Month]:
        return list(self.__months)

    def get_people(self) -> List[Person]:
        return self.__pipeline_manager.get_processor_manager().person_processor.get_people()


def extract_people(grid: ScheduleGrid) -> List[Person]:
    """Runs every staff row through the person filters and returns the eligible people in row order."""
    processor = PipelineProcessor(grid, PipelineManager(), MonthSegmenter())
    processor.process_data()
    return processor.get_people()
