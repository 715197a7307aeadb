from __future__ import annotations

from dataclasses import dataclass, field


DELIMITER = "---"


@dataclass(frozen=True)
class MetadataBlock:
    metadata: dict[str, str] = field(default_factory=dict)
    content: list[str] = field(default_factory=list)


def split_metadata(lines: list[str]) -> MetadataBlock:
    """Strip an optional leading ``---`` delimited ``key: value`` block.

    The block is only recognised when a closing ``---`` line exists; otherwise
    every line, the opening delimiter included, is returned as content. Lines
    inside the block without a colon are skipped.
    """
    if not lines or lines[0].strip() != DELIMITER:
        return MetadataBlock(metadata={}, content=list(lines))

    try:
        end = lines.index(DELIMITER, 1)
    except ValueError:
        return MetadataBlock(metadata={}, content=list(lines))

    metadata: dict[str, str] = {}
    for line in lines[1:end]:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        metadata[key.strip()] = value.strip()

    return MetadataBlock(metadata=metadata, content=lines[end + 1 :])
