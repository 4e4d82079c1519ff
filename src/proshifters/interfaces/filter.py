from abc import abstractmethod
from typing import Optional, final, Generic

from proshifters.interfaces.handler import AbstractHandler, TData


class Filter(AbstractHandler[TData], Generic[TData]):
    def __init__(self):
        super().__init__()
        self.__rejected = 0

    @final
    def handle(self, data: TData) -> Optional[TData]:
        if self.filter(data):
            return super().handle(data)
        self.__rejected += 1
        return None

    @abstractmethod
    def filter(self, data: TData) -> bool:
        pass

    def get_rejected_count(self) -> int:
        return self.__rejected
