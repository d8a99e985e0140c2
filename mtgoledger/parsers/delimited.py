"""
Delimiter tokenizer for the snapshot history table.

Rows are separated by newlines and columns by commas. Splitting is
lossless: joining the pieces with the delimiter reproduces the input,
including a trailing empty segment when the text ends with the delimiter.
"""

ROW_DELIMITER = "\n"
COLUMN_DELIMITER = ","


def split_fields(text: str, delimiter: str) -> list[str]:
    """
    Split text on a single-character delimiter.

    Args:
        text: Text to split, may be empty
        delimiter: Exactly one character

    Returns:
        Non-empty list of substrings. Text without the delimiter
        (including "") yields a single element.

    Raises:
        ValueError: If delimiter is not exactly one character
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    return text.split(delimiter)


def split_rows(text: str) -> list[str]:
    """Split a table into rows."""
    return split_fields(text, ROW_DELIMITER)


def split_columns(row: str) -> list[str]:
    """Split a table row into cells."""
    return split_fields(row, COLUMN_DELIMITER)
