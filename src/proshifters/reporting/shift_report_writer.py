from __future__ import annotations

from dataclasses import dataclass

from xlsxwriter import Workbook
from xlsxwriter.worksheet import Worksheet

from proshifters.common.defaults import REPORT_SHEET_NAME, WEEKEND_SHIFT_NAME
from proshifters.common.utils import prepare_string_for_excel
from proshifters.reporting.format_manager import FormatManager
from proshifters.reporting.shift_report import ReportGrid


@dataclass(frozen=True)
class ReportContext:
    workbook: Workbook
    formats: FormatManager


class ExcelSheetWriter:
    def __init__(self, ctx: ReportContext):
        self._ctx = ctx

    def write_report_sheet(self, *, sheet_name: str, report: ReportGrid) -> Worksheet:
        sheet = self._ctx.workbook.add_worksheet(sheet_name)

        self._write_month_row(sheet, report)
        self._write_shift_row(sheet, report)

        for r_index, row in enumerate(report.data_rows, start=report.header_row_count):
            self._write_data_row(sheet, r_index, row, report)

        sheet.freeze_panes(report.header_row_count, 1)
        sheet.autofit()
        return sheet

    def _write_month_row(self, sheet: Worksheet, report: ReportGrid) -> None:
        fm = self._ctx.formats
        sheet.write_blank(0, 0, None, fm.grouped_header_format)
        for span in report.month_spans:
            name = prepare_string_for_excel(span.name)
            # merge_range refuses a single cell range
            if span.width > 1:
                sheet.merge_range(0, span.first_column, 0, span.last_column, name, fm.grouped_header_format)
            else:
                sheet.write_string(0, span.first_column, name, fm.grouped_header_format)

    def _write_shift_row(self, sheet: Worksheet, report: ReportGrid) -> None:
        fm = self._ctx.formats
        for c_index, value in enumerate(report.shift_row):
            sheet.write_string(1, c_index, prepare_string_for_excel(value), fm.header_format)

    def _write_data_row(self, sheet: Worksheet, r_index: int, row: list, report: ReportGrid) -> None:
        fm = self._ctx.formats
        for c_index, value in enumerate(row):
            if isinstance(value, (int, float)):
                cell_format = fm.data_cell_format
                if report.shift_row[c_index] == WEEKEND_SHIFT_NAME:
                    cell_format = fm.highlight_cell_format
                sheet.write_number(r_index, c_index, value, cell_format)
            else:
                sheet.write_string(r_index, c_index, prepare_string_for_excel(value), fm.name_cell_format)


class ShiftReportWriter:
    def __init__(self, output_file: str):
        self.__output_file = output_file
        self.__workbook = Workbook(output_file)
        self.__format_manager = FormatManager(self.__workbook)
        self._ctx = ReportContext(self.__workbook, self.__format_manager)
        self._writer = ExcelSheetWriter(self._ctx)

    def generate(self, report: ReportGrid):
        print()
        print("Generating report, please wait.")
        self._writer.write_report_sheet(sheet_name=REPORT_SHEET_NAME, report=report)

    def close(self):
        self.__workbook.close()
        print()
        print("Please see report: {}".format(self.__output_file))
