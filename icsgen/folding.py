"""RFC 5545 line folding."""

CRLF = "\r\n"
MAX_LINE_OCTETS = 75


class LineFolder:
    """Split logical content lines into physical lines of at most ``limit`` octets.

    Lengths are measured in UTF-8 octets, excluding the CRLF terminator.
    Continuation lines start with a single space, which counts towards the
    limit. A multi-byte character is never split across two physical lines.
    """

    def __init__(self, limit: int = MAX_LINE_OCTETS):
        # a 4-octet character plus the continuation space must always fit
        if limit < 5:
            raise ValueError(f"Fold limit must be at least 5 octets, got {limit}")
        self.limit = limit

    def fold(self, line: str) -> list[str]:
        """Fold one logical line, returning CRLF-terminated physical lines."""
        if len(line.encode("utf-8")) <= self.limit:
            return [line + CRLF]

        physical: list[str] = []
        current: list[str] = []
        size = 0
        for ch in line:
            width = len(ch.encode("utf-8"))
            if size + width > self.limit:
                physical.append("".join(current))
                current = [" "]
                size = 1
            current.append(ch)
            size += width
        physical.append("".join(current))
        return [part + CRLF for part in physical]


_default_folder = LineFolder()


def fold_line(line: str) -> list[str]:
    """Fold ``line`` at the standard 75-octet limit."""
    return _default_folder.fold(line)
