from proshifters.data.staff_row import StaffRow
from proshifters.interfaces.handler import Handler
from proshifters.processing.filter_manager import FilterManager
from proshifters.processing.processor_manager import ProcessorManager


class PipelineManager:
    def __init__(self):
        self.__filter_manager = FilterManager()
        self.__processor_manager = ProcessorManager()
        self.__pipeline = self.__build_pipeline()

    def __build_pipeline(self) -> Handler[StaffRow]:
        pipeline = (self.__filter_manager.exclude_blank_name_filter
                    .set_next(self.__filter_manager.eligible_staff_filter)
                    .set_next(self.__processor_manager.person_processor))
        return pipeline

    def get_pipeline(self) -> Handler[StaffRow]:
        return self.__pipeline

    def get_filter_manager(self) -> FilterManager:
        return self.__filter_manager

    def get_processor_manager(self) -> ProcessorManager:
        return self.__processor_manager
