from abc import ABC, abstractmethod

from proshifters.data.schedule_grid import ScheduleGrid


class DataSource(ABC):
    @abstractmethod
    def read_data(self) -> ScheduleGrid:
        pass
