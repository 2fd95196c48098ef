#!/usr/bin/env python3
"""
Check the shuffle for positional bias.

Shuffles a fresh deck many times and counts where each card ends up. With an
unbiased shuffle every card lands in every position about trials / 9 times.

Usage:
    python3 scripts/shuffle_audit.py --trials 100000 --seed 0
"""

from typing import Dict, List, Optional
import argparse
import random

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from deckhand.cards import Deck

console = Console()


def position_counts(
    trials: int,
    seed: Optional[int] = None,
    progress: Optional[Progress] = None,
) -> Dict[str, List[int]]:
    """
    Shuffle a new deck `trials` times.

    Returns a mapping of card label -> list of counts, one per position,
    in the deck's construction order.
    """
    rng = random.Random(seed)
    labels = Deck(rng).labels()
    counts = {label: [0] * len(labels) for label in labels}

    task = progress.add_task("[cyan]Shuffling...", total=trials) if progress else None
    for _ in range(trials):
        deck = Deck(rng)
        deck.shuffle()
        for pos, label in enumerate(deck.labels()):
            counts[label][pos] += 1
        if progress is not None:
            progress.update(task, advance=1)

    return counts


def max_deviation(counts: Dict[str, List[int]], trials: int) -> float:
    """Largest relative distance of any cell from the uniform expectation."""
    expected = trials / len(counts)
    return max(abs(c - expected) / expected for row in counts.values() for c in row)


def main():
    parser = argparse.ArgumentParser(
        description="Measure positional bias of the deck shuffle"
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=100000,
        help="Number of shuffles (default: 100000)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducibility (default: random)"
    )
    args = parser.parse_args()

    if args.trials <= 0:
        console.print("[red]Error: --trials must be positive[/red]")
        return 1

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        counts = position_counts(args.trials, args.seed, progress)

    table = Table(title=f"Position counts over {args.trials} shuffles")
    table.add_column("Card", style="cyan")
    for pos in range(len(counts)):
        table.add_column(str(pos), justify="right")
    for label, row in counts.items():
        table.add_row(label, *(str(c) for c in row))
    console.print(table)

    console.print(f"[dim]Expected per cell: {args.trials / len(counts):.1f}[/dim]")
    console.print(f"[cyan]Max relative deviation: {max_deviation(counts, args.trials):.2%}[/cyan]")
    return 0


if __name__ == "__main__":
    exit(main())
