# Schedule workbook layout
DEFAULT_SHEET_NAME = "Schedule"
DEFAULT_OUTPUT_FILE_NAME = "result.xlsx"

# Header rows of the schedule grid
MONTH_NAME_ROW = 0
DAY_NAME_ROW = 1
DAY_NUMBER_ROW = 2
HEADER_ROW_COUNT = 3

# Metadata columns are read from the last cell of the leading slice
NAME_COLUMN_WIDTH = 7
ELIGIBLE_COLUMN_WIDTH = 4
ELIGIBLE_FLAG = "Y"

# Day-number markers
FIRST_DAY_MARKER = "1"
WEEKEND_DAY_MARKER = "S"

# Shift codes, in report column order
WEEKEND_SHIFT_NAME = "Weekend"
VALID_SHIFT_NAMES = (
    WEEKEND_SHIFT_NAME, "D", "D10", "D12", "S", "S10", "S12", "M", "M10", "M12", "FF", "EV", "FPC"
)

# Shift trade markers are dropped, split coverage folds into the full shift
SHIFT_SWAP_GLYPHS = ("↓", "↑")
SHIFT_CODE_MERGES = (
    ("D2", "D12"),
    ("S2", "S12"),
    ("M2", "M12"),
)

# Shift shown in the console summary
SUMMARY_SHIFT_NAME = "D"

REPORT_SHEET_NAME = "Sheet1"
NAME_HEADER = "Name"
