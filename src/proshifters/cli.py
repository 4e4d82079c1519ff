import sys

from proshifters.cli_args import parse_arguments
from proshifters.common.config import Config
from proshifters.common.defaults import SUMMARY_SHIFT_NAME
from proshifters.common.errors import ProshiftersError
from proshifters.common.utils import print_list_with_title
from proshifters.core.month_segmenter import MonthSegmenter
from proshifters.data.xlsx_data_source import XlsxDataSource
from proshifters.processing.pipeline_manager import PipelineManager
from proshifters.processing.pipeline_processor import PipelineProcessor
from proshifters.reporting.shift_report import ShiftReportAssembler
from proshifters.reporting.shift_report_writer import ShiftReportWriter


def print_shift_summary(people, months, calculator, shift_name: str = SUMMARY_SHIFT_NAME):
    for person in people:
        print(f"{person.name}:")
        for month in months:
            shifts = calculator.tally(person, month)
            print(f"\t{month.name} {shift_name}: {shifts.get(shift_name, 0)}")


def run(config: Config):
    print(f"Reading schedule: {config.input_file}")
    grid = XlsxDataSource(config.input_file, config.sheet_name).read_data()

    month_segmenter = MonthSegmenter()
    pipeline_manager = PipelineManager()
    processor = PipelineProcessor(grid, pipeline_manager, month_segmenter)
    processor.process_data()

    months = processor.get_months()
    people = processor.get_people()

    print_list_with_title("Months found:", [month.name for month in months])
    dropped = month_segmenter.dropped_trailing_month
    if dropped is not None:
        print(f"WARNING: '{dropped.name}' starting at column {dropped.start_column + 1} has no closing "
              f"blank day column and was not counted.")
        print()

    # Display filtering statistics
    pipeline_manager.get_filter_manager().display_summary()

    calculator = pipeline_manager.get_processor_manager().shift_tally_calculator
    print_shift_summary(people, months, calculator)

    report = ShiftReportAssembler(calculator).assemble(months, people)
    writer = ShiftReportWriter(config.output_file)
    writer.generate(report)
    writer.close()


def main(argv=None) -> int:
    parser, args = parse_arguments(argv)
    if args.input_file is None:
        parser.print_usage(sys.stderr)
        return 0

    # Config object stores all arguments parsed
    config = Config(args)
    try:
        run(config)
    except (ProshiftersError, FileNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
