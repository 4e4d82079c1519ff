import argparse


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(prog="proshifters",
                                     description="""Counts the shifts each pro-shifter worked per month in a staff schedule workbook. The result is written to result.xlsx next to the schedule.""",
                                     formatter_class=lambda prog: argparse.HelpFormatter(prog, max_help_position=80))

    parser.add_argument('input_file', metavar='<schedule-path>', nargs='?', type=str,
                        help="Schedule workbook with a 'Schedule' sheet.")

    return parser, parser.parse_args(argv)
