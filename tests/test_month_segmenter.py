from proshifters.core.month_segmenter import MonthSegmenter
from proshifters.data.month import Month


def segment(numbers, names=None, months=None, **kwargs):
    names = names if names is not None else ["x"] * len(numbers)
    months = months if months is not None else [f"m{i}" for i in range(len(numbers))]
    return MonthSegmenter(**kwargs).segment(numbers, names, months)


def test_segment_schedule(schedule_grid):
    months = MonthSegmenter().segment_grid(schedule_grid)

    assert months == [
        Month("January", 7, ("M", "T", "S")),
        Month("February", 10, ("S", "M")),
    ]


def test_day_labels_are_trimmed_and_upper_cased():
    months = segment(["1", "2", ""], names=[" s ", "m", "t"])

    assert months[0].days == ("S", "M")


def test_leading_blank_columns_are_skipped():
    months = segment(["", "", "", "1", "2", ""])

    assert [(m.name, m.start_column, len(m.days)) for m in months] == [("m3", 3, 2)]


def test_padded_day_one_starts_a_month():
    months = segment([" 1 ", "2", " "])

    assert [(m.start_column, len(m.days)) for m in months] == [(0, 2)]


def test_blank_column_ends_days_until_next_first_day():
    months = segment(["1", "2", "", "x", "1", "2", ""])

    assert [(m.start_column, len(m.days)) for m in months] == [(0, 2), (4, 2)]


def test_consecutive_months_split_on_first_day():
    months = segment(["1", "2", "3", "1", "2", "1", ""])

    assert [(m.start_column, m.end_column) for m in months] == [(0, 3), (3, 5), (5, 6)]


def test_trailing_month_without_terminator_is_dropped():
    segmenter = MonthSegmenter()
    months = segmenter.segment(["1", "2", "1", "2", "3"], ["x"] * 5, ["Jan", "", "Feb", "", ""])

    assert [m.name for m in months] == ["Jan"]
    assert segmenter.dropped_trailing_month == Month("Feb", 2, ("X", "X", "X"))


def test_trailing_month_closed_at_end_of_row_when_enabled():
    segmenter = MonthSegmenter(close_trailing_month=True)
    months = segmenter.segment(["1", "2", "1", "2", "3"], ["x"] * 5, ["Jan", "", "Feb", "", ""])

    assert [(m.name, len(m.days)) for m in months] == [("Jan", 2), ("Feb", 3)]
    assert segmenter.dropped_trailing_month is None


def test_no_trailing_month_reported_when_row_is_terminated():
    segmenter = MonthSegmenter()
    segmenter.segment(["1", "2", ""], ["x"] * 3, ["Jan", "", ""])

    assert segmenter.dropped_trailing_month is None


def test_short_day_name_row_keeps_month_width():
    months = segment(["1", "2", "3", ""], names=["M"])

    assert months[0].days == ("M", "", "")


def test_segmentation_is_deterministic(schedule_grid):
    segmenter = MonthSegmenter()

    assert segmenter.segment_grid(schedule_grid) == segmenter.segment_grid(schedule_grid)


def test_month_spans_do_not_overlap():
    numbers = ["", "1", "2", "3", "1", "2", "", "", "1", "2", "3", "4", "1", ""]
    months = segment(numbers)

    for month in months:
        assert len(month.days) == month.end_column - month.start_column
    for previous, current in zip(months, months[1:]):
        assert previous.end_column <= current.start_column
    assert len({m.start_column for m in months}) == len(months)
