"""Ready-made fitness functions for bit-string genomes.

All functions are pure and module-level, so they can be shipped to a process
pool. Higher scores are better. Scores are exact ints.
"""

from typing import Callable

import numpy as np

from simple_ga.exceptions import UnknownFitnessFunction
from simple_ga.genome import Genome

TRAP_SIZE = 4


def max_ones(genome: Genome) -> int:
    """Number of 1 bits (OneMax)."""
    return int(np.count_nonzero(np.asarray(genome, dtype=np.int8)))


def min_ones(genome: Genome) -> int:
    """Number of 0 bits."""
    return len(genome) - int(np.count_nonzero(np.asarray(genome, dtype=np.int8)))


def leading_ones(genome: Genome) -> int:
    """Length of the run of 1s at the start of the genome."""
    bits = np.asarray(genome, dtype=np.int8)
    zeros = np.flatnonzero(bits == 0)
    return int(zeros[0]) if zeros.size else int(bits.size)


def alternating(genome: Genome) -> int:
    """Number of neighbouring positions holding different bits."""
    bits = np.asarray(genome, dtype=np.int8)
    return int(np.count_nonzero(np.diff(bits)))


def binary_value(genome: Genome) -> int:
    """The genome read as an unsigned big-endian integer, at any length."""
    return int("".join(str(bit) for bit in genome) or "0", 2)


def deceptive_trap(genome: Genome) -> int:
    """Sum of 4-bit trap functions over consecutive blocks.

    A full block of 1s scores ``TRAP_SIZE``; otherwise a block scores
    ``TRAP_SIZE - 1 - ones``, which pulls hill climbers towards all zeros. A
    trailing partial block is scored the same way with its own size.
    """
    bits = np.asarray(genome, dtype=np.int8)
    total = 0
    for start in range(0, bits.size, TRAP_SIZE):
        block = bits[start : start + TRAP_SIZE]
        ones = int(block.sum())
        total += block.size if ones == block.size else block.size - 1 - ones
    return total


FITNESS_FUNCTIONS: dict[str, Callable[[Genome], int]] = {
    "max_ones": max_ones,
    "min_ones": min_ones,
    "leading_ones": leading_ones,
    "alternating": alternating,
    "binary_value": binary_value,
    "deceptive_trap": deceptive_trap,
}


def resolve_fitness_function(name: str) -> Callable[[Genome], int]:
    """Look up a fitness function by its registered name."""
    key = name.strip().replace("-", "_")
    try:
        return FITNESS_FUNCTIONS[key]
    except KeyError:
        raise UnknownFitnessFunction(
            f"unknown fitness function: {name} "
            f"(available: {', '.join(sorted(FITNESS_FUNCTIONS))})"
        ) from None
