from __future__ import annotations

from dataclasses import dataclass
import re


TITLE = "="
NOTE = ">"
COMPONENT = "+"
STEP = "#"
INGREDIENT = "-"

LINE_RE = re.compile(r"^([=>+#-])\s*(.*)$")


@dataclass(frozen=True)
class ClassifiedLine:
    prefix: str
    payload: str


def classify_line(line: str) -> ClassifiedLine | None:
    text = line.lstrip()
    if not text:
        return None
    match = LINE_RE.match(text)
    if not match:
        return None
    return ClassifiedLine(prefix=match.group(1), payload=match.group(2).strip())


def classify_lines(lines: list[str]) -> list[ClassifiedLine]:
    classified: list[ClassifiedLine] = []
    for line in lines:
        item = classify_line(line)
        if item is not None:
            classified.append(item)
    return classified
