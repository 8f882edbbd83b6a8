"""Pure operators on bit-string genomes.

Genomes are tuples of 0/1 ints. Every operator returns a new tuple and never
touches its inputs.
"""

import random
from typing import Sequence

from simple_ga.exceptions import GenomeLengthMismatchError
from simple_ga.utils.rand import coin_toss

Genome = tuple[int, ...]

__all__ = [
    "Genome",
    "crossover",
    "flip_bit",
    "mutate_genome",
    "random_genome",
]


def flip_bit(bit: int) -> int:
    """Return 1 for 0 and 0 for anything else."""
    return 1 if bit == 0 else 0


def random_genome(length: int, rng: random.Random) -> Genome:
    """Draw *length* independent uniform bits."""
    return tuple(rng.randint(0, 1) for _ in range(length))


def mutate_genome(
    genome: Sequence[int], mutation_rate: float, rng: random.Random
) -> Genome:
    """Flip each bit independently with probability *mutation_rate*.

    Rates outside ``[0, 1]`` are rejected rather than clamped.
    """
    if not 0.0 <= mutation_rate <= 1.0:
        raise ValueError(f"mutation_rate must be in [0, 1], got {mutation_rate}")
    return tuple(
        flip_bit(bit) if coin_toss(rng, mutation_rate) else bit for bit in genome
    )


def crossover(
    genome1: Sequence[int],
    genome2: Sequence[int],
    rng: random.Random,
    *,
    point: int | None = None,
    head_first: bool | None = None,
) -> Genome:
    """Single-point crossover returning one child.

    The crossover point is drawn uniformly from ``[0, L]`` inclusive, so the
    child may be a plain copy of one parent. A fair coin decides which parent
    supplies the head ``[0, point)``; the other supplies the tail.

    Args:
        genome1: First parent genome.
        genome2: Second parent genome, same length as *genome1*.
        rng: Random source.
        point: Force the crossover point instead of drawing it.
        head_first: Force the head source; True means *genome1*.

    Returns:
        Child genome of length ``L``.
    """
    length = len(genome1)
    if len(genome2) != length:
        raise GenomeLengthMismatchError(
            f"Cannot cross over genomes of length {length} and {len(genome2)}"
        )

    if point is None:
        point = rng.randint(0, length)
    elif not 0 <= point <= length:
        raise ValueError(f"Crossover point {point} outside [0, {length}]")

    if head_first is None:
        head_first = coin_toss(rng)
    head, tail = (genome1, genome2) if head_first else (genome2, genome1)

    return tuple(head[:point]) + tuple(tail[point:])
