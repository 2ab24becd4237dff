"""Quote-aware splitting of a single roster line."""

from __future__ import annotations

DELIMITER = ";"
QUOTE = '"'


def split_line(line: str, delimiter: str = DELIMITER) -> list[str]:
    r'''Split one physical line into trimmed field strings.

    A quote toggles quoted mode; inside quotes the delimiter is literal and
    a doubled quote stands for one quote character. Unbalanced quotes are
    tolerated: whatever has accumulated at end of line becomes the last field.

    Examples:
        >>> split_line('1;"a;b";x')
        ['1', 'a;b', 'x']
        >>> split_line('"say ""hi"""')
        ['say "hi"']
        >>> split_line("")
        ['']
    '''
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current).strip())
    return fields
