"""Inline emphasis tokenizer."""

from __future__ import annotations

from storypush.contracts.document import Mark, TextRun

DELIMITERS: dict[str, Mark] = {
    "*": Mark.BOLD,
    "_": Mark.ITALIC,
    "`": Mark.CODE,
}


def tokenize(line: str) -> list[TextRun]:
    """Split *line* into styled runs.

    A delimiter opens a span only when the same character occurs again later in
    the line with at least one character between them; otherwise it is kept as
    literal text. Spans do not nest and the leftmost delimiter wins.
    """
    runs: list[TextRun] = []
    buffer: list[str] = []
    index = 0
    while index < len(line):
        char = line[index]
        mark = DELIMITERS.get(char)
        if mark is not None:
            end = line.find(char, index + 1)
            if end > index + 1:
                if buffer:
                    runs.append(TextRun(text="".join(buffer)))
                    buffer.clear()
                runs.append(TextRun(text=line[index + 1 : end], marks=frozenset({mark})))
                index = end + 1
                continue
        buffer.append(char)
        index += 1

    if buffer:
        runs.append(TextRun(text="".join(buffer)))
    return runs or [TextRun(text=line)]
