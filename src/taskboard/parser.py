"""Parse and format delimited-text (CSV) board records."""

_SPECIAL = (",", '"', "\n", "\r")


def split_records(text: str) -> list[str]:
    """Split text into records on line breaks outside quoted fields.

    Accepts both "\\n" and "\\r\\n" terminators. A quoted field may span
    lines; its line breaks are kept in the record. Blank records are dropped.
    """
    records: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in text:
        if char == '"':
            # A doubled quote toggles twice, so the state stays right.
            in_quotes = not in_quotes
        elif char == "\n" and not in_quotes:
            records.append("".join(current))
            current = []
            continue
        current.append(char)
    if current:
        records.append("".join(current))

    result = []
    for record in records:
        if record.endswith("\r"):
            record = record[:-1]
        if record.strip():
            result.append(record)
    return result


def parse_line(line: str) -> list[str]:
    """Split one record into field values.

    A bare quote toggles the inside-quotes state; inside quotes ``""`` is a
    literal quote. Commas only separate fields outside quotes.

    'a,"b,c",d' → ["a", "b,c", "d"]
    '"say ""hi"" now"' → ['say "hi" now']
    """
    values: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    values.append("".join(current))
    return values


def quote_field(value: str) -> str:
    """Quote a field if it holds a comma, quote or line break."""
    if any(c in value for c in _SPECIAL):
        return '"' + value.replace('"', '""') + '"'
    return value


def format_line(values: list[str]) -> str:
    """Join field values into one record, quoting where needed."""
    return ",".join(quote_field(v) for v in values)
