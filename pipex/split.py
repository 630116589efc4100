"""Splitting of command lines into argument lists, with single-quote grouping."""

DEFAULT_SEPARATOR = " "
DEFAULT_QUOTE = "'"


def _first_char(chars: str, what: str) -> str:
    if not chars:
        raise ValueError(f"{what} must not be empty")
    return chars[0]


def _skip(line: str, pos: int, sep: str) -> int:
    """Return the first position at or after pos that does not hold sep."""
    rest = line[pos:]
    return pos + len(rest) - len(rest.lstrip(sep))


def trim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in chars."""
    return text.strip(chars) if chars else text


def count_words(
    text: str, separator: str = DEFAULT_SEPARATOR, quote: str = DEFAULT_QUOTE
) -> int:
    """Estimate how many words split_command yields; never below the real count."""
    sep = _first_char(separator, "separator")
    q = _first_char(quote, "quote")
    line = trim(text, separator)
    count = 1
    pos = 0
    if line.startswith(q):
        close = line.find(q, 1)
        if close == -1:
            return count
        if close + 1 < len(line):
            count += 1
        pos = close
    cut = line.find(sep, pos)
    while cut != -1:
        cut = _skip(line, cut, sep)
        if line.startswith(q, cut):
            cut = line.find(q, cut + 1)
            if cut != -1 and cut + 1 < len(line) and line[cut + 1] != sep:
                count += 1
        if cut != -1:
            cut = line.find(sep, cut)
        count += 1
    return count


def split_command(
    text: str, separator: str = DEFAULT_SEPARATOR, quote: str = DEFAULT_QUOTE
) -> list[str]:
    """Split a command line on separator, keeping quoted groups as one word.

    Only the first character of separator and quote is significant; the
    whole of separator is trimmed from both ends of the line first.
    """
    sep = _first_char(separator, "separator")
    q = _first_char(quote, "quote")
    line = trim(text, separator)
    words: list[str] = []
    pos = 0

    if line.startswith(q):
        close = line.find(q, 1)
        if close == -1:
            return [line[1:]]
        words.append(line[1:close])
        pos = close + 1

    cut = line.find(sep, pos)
    while cut != -1:
        words.append(line[pos:cut])
        pos = cut = _skip(line, cut, sep)
        if line.startswith(q, pos):
            close = line.find(q, pos + 1)
            if close == -1:
                break
            words.append(line[pos + 1:close])
            pos = cut = _skip(line, close + 1, sep)
        cut = line.find(sep, cut)

    if pos < len(line):
        words.append(line[pos:])
    return words