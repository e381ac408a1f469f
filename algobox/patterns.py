"""Text patterns made of asterisks."""


def butterfly(n: int) -> str:
    """Return a butterfly of ``n`` rows per wing, one line per row."""
    rows = range(1, n + 1)
    heights = [*rows, *reversed(rows)]
    lines = ("* " * i + "  " * (2 * (n - i)) + "* " * i + "\n" for i in heights)
    return "".join(lines)