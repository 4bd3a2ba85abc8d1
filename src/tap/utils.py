"""Text utilities."""


def trim_trailing_whitespace(text: str) -> str:
    """Strip trailing whitespace from every line.

    Lines are split on ``\\n`` only, so form feeds and vertical tabs inside a
    line are kept. Lines are joined with a single newline and no trailing
    newline is added, so ``"a \\r\\nb\\n"`` becomes ``"a\\nb"``.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "\n".join(line.rstrip() for line in lines)
