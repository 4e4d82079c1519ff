import datetime
import os

import openpyxl

from proshifters.common.errors import SheetNotFoundError
from proshifters.data.schedule_grid import ScheduleGrid
from proshifters.interfaces.data_source import DataSource


def cell_to_text(value) -> str:
    if value is None:
        return ''
    # Day numbers come back from Excel as floats
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


class XlsxDataSource(DataSource):
    def __init__(self, input_file: str, sheet_name: str):
        self.__input_file = input_file
        self.__sheet_name = sheet_name

    def read_data(self) -> ScheduleGrid:
        if not os.path.isfile(self.__input_file):
            raise FileNotFoundError(f"Schedule file not found: {self.__input_file}")

        wb = openpyxl.load_workbook(self.__input_file, read_only=True, data_only=True)
        try:
            if self.__sheet_name not in wb.sheetnames:
                raise SheetNotFoundError(self.__sheet_name, self.__input_file)
            ws = wb[self.__sheet_name]
            rows = [[cell_to_text(value) for value in row] for row in ws.iter_rows(values_only=True)]
        finally:
            wb.close()

        return ScheduleGrid.from_rows(rows).validate()
