"""Minimal quoted-CSV tokenizer for staff-uploaded spreadsheets."""

from __future__ import annotations

from typing import List


def split_data_lines(text: str) -> List[str]:
    """Split file text into lines, dropping lines that are blank after trimming."""
    return [line for line in text.split("\n") if line.strip()]


def parse_csv_line(line: str, delimiter: str = ",") -> List[str]:
    """Split one line into trimmed fields.

    A double quote toggles "inside quotes" and is not kept. The delimiter
    only splits outside quotes. There is no escaping: "" simply toggles twice.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields
