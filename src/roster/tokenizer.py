"""Quote-aware tokenizing of single delimited lines."""

DELIMITER = ","
QUOTE = '"'


def tokenize(line: str) -> list[str]:
    """Split one line into field values.

    A double quote toggles quoted mode and is dropped from the output. The
    delimiter only closes a field outside quoted mode. An unterminated quote
    is not an error: the rest of the line simply lands in the last field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def split_header(line: str) -> list[str]:
    """Split a header line on the delimiter (no quote handling) and trim each name."""
    return [name.strip() for name in line.split(DELIMITER)]
