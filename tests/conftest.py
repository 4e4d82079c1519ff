import openpyxl
import pytest

from proshifters.data.schedule_grid import ScheduleGrid

META = ["", "", "", "", "", "", ""]


def staff_row(flag, name, *shifts):
    return ["", "", "", flag, "", "", name, *shifts]


SCHEDULE_ROWS = [
    META + ["January", "", "", "February", "", ""],
    META + ["M", "T", "S", "S", "M", "T"],
    META + ["1", "2", "3", "1", "2", ""],
    staff_row("Y", "Alice", "D", "s2", "↓D", "FF", "OFF", ""),
    staff_row("n", "Bob", "D", "D", "D", "D", "D", ""),
    staff_row(" y ", "   ", "D", "D", "D", "D", "D", ""),
    staff_row("Y", "Carol", "M2", "M10"),
]


@pytest.fixture
def schedule_grid() -> ScheduleGrid:
    return ScheduleGrid.from_rows(SCHEDULE_ROWS)


@pytest.fixture
def schedule_file(tmp_path):
    path = tmp_path / "schedule.xlsx"
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Schedule"
    for row in SCHEDULE_ROWS:
        # Day numbers are stored as numbers, the way Excel keeps them
        ws.append([int(cell) if cell.isdigit() else (cell or None) for cell in row])
    wb.save(path)
    return path
