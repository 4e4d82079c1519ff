import re

# Excel rejects control characters other than tab, newline and carriage return
_illegal_excel_chars_re = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')

EXCEL_MAX_STRING_LENGTH = 32767


def prepare_string_for_excel(value) -> str:
    """
    Converts a cell value into a string xlsxwriter can store.

    :param value: Any cell value, None is written as an empty string.
    :return: The string with illegal characters removed, truncated to the Excel cell limit.
    """
    if value is None:
        return ''
    text = _illegal_excel_chars_re.sub('', str(value))
    return text[:EXCEL_MAX_STRING_LENGTH]


def print_summary(title: str, data, detail: bool = False):
    """
    Prints a summary title followed by the sum of data values. If detail is True and data is a dictionary,
    detailed key-value pairs are printed as well.

    :param title: The title of the summary.
    :param data: The data to summarize, can be an int, list, or dictionary.
    :param detail: Whether to print detailed entries of the data if it's a dictionary.
    """
    if data is None:
        print(f"{title}: No data")
        return

    if isinstance(data, int):
        print(f"{title}: {data}")
    elif isinstance(data, dict):
        data_sum = sum(data.values())
        print(f"{title}: {data_sum}")
        if detail:
            for key, value in data.items():
                print(f"  {key}: {value}")
            print()
    else:
        try:
            data_sum = sum(data)
            print(f"{title}: {data_sum}")
        except TypeError:
            print(f"{title}: Data type not supported")


def print_list_with_title(title: str, items: list):
    """
    Prints a list of items with a title.

    :param title: The title for the list.
    :param items: The list of items to print.
    """
    if items:
        print(title)
        for item in items:
            print(item)
        print()
