from typing import List

from proshifters.data.person import Person
from proshifters.data.staff_row import StaffRow
from proshifters.interfaces.processor import Processor


class PersonProcessor(Processor[StaffRow]):
    __people: List[Person]

    def __init__(self):
        super().__init__()
        self.__people = []

    def execute(self, data: StaffRow) -> None:
        self.__people.append(data.to_person())

    def get_people(self) -> List[Person]:
        return list(self.__people)
