import re

_BLOCK_SEPARATOR_RE = re.compile(r"\n\s*\n")


def split_blocks(text: str) -> list[str]:
    """Split text into blocks on blank lines; blocks are stripped, never empty."""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    blocks = (block.strip() for block in _BLOCK_SEPARATOR_RE.split(normalized))
    return [block for block in blocks if block]


def non_empty_lines(text: str) -> list[str]:
    """Stripped lines of *text*, blank lines removed."""
    lines = (line.strip() for line in text.replace("\r\n", "\n").split("\n"))
    return [line for line in lines if line]
