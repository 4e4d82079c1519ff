import openpyxl

from proshifters.common.defaults import VALID_SHIFT_NAMES
from proshifters.core.month_segmenter import MonthSegmenter
from proshifters.core.processors import ShiftTallyCalculator
from proshifters.processing.pipeline_processor import extract_people
from proshifters.reporting.shift_report import MonthSpan, ReportGrid, ShiftReportAssembler
from proshifters.reporting.shift_report_writer import ShiftReportWriter


def write_report(path, report):
    writer = ShiftReportWriter(str(path))
    writer.generate(report)
    writer.close()
    return openpyxl.load_workbook(path)


def test_report_workbook(tmp_path, schedule_grid):
    months = MonthSegmenter().segment_grid(schedule_grid)
    report = ShiftReportAssembler(ShiftTallyCalculator()).assemble(months, extract_people(schedule_grid))

    ws = write_report(tmp_path / "result.xlsx", report)["Sheet1"]

    assert sorted(str(r) for r in ws.merged_cells.ranges) == ["B1:N1", "O1:AA1"]
    assert ws["B1"].value == "January"
    assert ws["O1"].value == "February"
    assert [c.value for c in ws[2]] == ["Name"] + list(VALID_SHIFT_NAMES) * 2
    assert ws["A3"].value == "Alice"
    assert ws["A4"].value == "Carol"
    # Alice, January: Weekend, D, D10, D12, S, S10, S12
    assert [ws.cell(3, col).value for col in range(2, 9)] == [1, 2, 0, 0, 0, 0, 1]
    assert ws.freeze_panes == "B3"


def test_single_column_month_is_not_merged(tmp_path):
    report = ReportGrid(
        month_row=["", "Jan"],
        shift_row=["Name", "Weekend"],
        data_rows=[["Ann", 3]],
        month_spans=[MonthSpan("Jan", 1, 1)],
    )

    ws = write_report(tmp_path / "single.xlsx", report).active

    assert not ws.merged_cells.ranges
    assert ws["B1"].value == "Jan"
    assert ws["B3"].value == 3


def test_names_are_sanitized(tmp_path):
    report = ReportGrid(
        month_row=[""],
        shift_row=["Name"],
        data_rows=[["Bad\x07Name"]],
    )

    ws = write_report(tmp_path / "names.xlsx", report).active

    assert ws["A3"].value == "BadName"


def test_close_reports_output_file(tmp_path, capsys):
    path = tmp_path / "out.xlsx"
    writer = ShiftReportWriter(str(path))
    writer.generate(ReportGrid(month_row=[""], shift_row=["Name"]))
    writer.close()

    assert path.exists()
    assert f"Please see report: {path}" in capsys.readouterr().out
