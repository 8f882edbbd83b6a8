from __future__ import annotations

import random
from typing import TYPE_CHECKING

from simple_ga.genome import random_genome
from simple_ga.individual import Individual

if TYPE_CHECKING:
    from simple_ga.engine.config import GAParams


def generate_individual(genome_size: int, rng: random.Random) -> Individual:
    """Create one unevaluated individual with a uniformly random genome."""
    return Individual(genome=random_genome(genome_size, rng))


def generate_population(params: GAParams, rng: random.Random) -> list[Individual]:
    """Create the initial population of ``params.population_size`` individuals."""
    return [
        generate_individual(params.genome_size, rng)
        for _ in range(params.population_size)
    ]
