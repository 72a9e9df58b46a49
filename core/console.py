"""Console output for the demos (stdout, verbatim text)."""

from rich.console import Console

console = Console(highlight=False, emoji=False, soft_wrap=True)


def echo(line: str = "") -> None:
    """Print ``line`` exactly as given; square brackets are not markup here."""
    console.print(line, markup=False)
