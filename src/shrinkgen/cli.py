from typing import Optional

import typer

from .arbitrary import Shrinkable, halving_shrinkable, integer, set_of
from .config import get_settings
from .errors import ShrinkgenError
from .logging import get_logger
from .random import RandomSource

app = typer.Typer(help="shrinkgen – sample generated values and inspect their shrink trees", no_args_is_help=True)


def format_tree(node: Shrinkable, depth: int, width: int, level: int = 0) -> list[str]:
    """Render a shrink tree as indented lines, ``width`` children per node, ``depth`` levels deep."""
    lines = ["  " * level + repr(node.value)]
    if depth <= 0:
        return lines
    for child in node.shrink().take(width):
        lines.extend(format_tree(child, depth - 1, width, level + 1))
    return lines


@app.command()
def sample(
    seed: Optional[int] = typer.Option(None, help="Seed for the random source (defaults to SHRINKGEN_SEED or 42)"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of values to draw"),
    min_length: int = typer.Option(0, help="Minimum number of unique elements"),
    max_length: Optional[int] = typer.Option(None, help="Maximum number of unique elements"),
    min_value: int = typer.Option(0, "--min", help="Smallest element value"),
    max_value: int = typer.Option(10, "--max", help="Largest element value"),
    shrinks: int = typer.Option(0, help="Number of shrink candidates to print for each value"),
) -> None:
    """
    Draw arrays of unique integers and print them.

    Useful to eyeball how length bounds, deduplication and shrinking behave
    for a given seed.
    """
    logger = get_logger(__name__)

    try:
        settings = get_settings()
        seed = settings.default_seed if seed is None else seed
        count = settings.num_samples if count is None else count

        arb = set_of(integer(min_value, max_value), min_length=min_length, max_length=max_length)
        random = RandomSource(seed)
        logger.info(f"Sampling {count} values with seed {seed}")
        for index in range(count):
            shrinkable = arb.generate(random)
            typer.echo(f"#{index}: {shrinkable.value}")
            for child in shrinkable.shrink().take(shrinks):
                typer.echo(f"    -> {child.value}")
    except ShrinkgenError as exc:
        logger.error(f"Sampling failed: {exc}")
        raise typer.Exit(code=1) from exc


@app.command("shrink-tree")
def shrink_tree(
    value: int = typer.Argument(..., help="Integer whose halving shrink tree is printed"),
    depth: int = typer.Option(2, help="Number of levels to expand below the root"),
    width: int = typer.Option(8, help="Maximum number of children shown per node"),
) -> None:
    """Print the halving shrink tree of an integer."""
    for line in format_tree(halving_shrinkable(value), depth, width):
        typer.echo(line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
