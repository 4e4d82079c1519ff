import os

from proshifters.common.defaults import DEFAULT_OUTPUT_FILE_NAME, DEFAULT_SHEET_NAME


class Config:
    def __init__(self, args):
        # Data source configurations
        self.input_file = args.input_file
        self.sheet_name = DEFAULT_SHEET_NAME

        # Output configurations
        self.output_file = Config.__prepare_output_file(args.input_file)

    @staticmethod
    def __prepare_output_file(input_file: str) -> str:
        # Result is written next to the schedule it was calculated from
        input_dir = os.path.dirname(input_file) or '.'
        return os.path.join(input_dir, DEFAULT_OUTPUT_FILE_NAME)
