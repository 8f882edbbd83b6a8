"""Building the next generation from the selected parents.

The parents survive unchanged (elitism) and the rest of the population is
filled one child at a time. Each child comes from one of two strategies chosen
by a weighted coin: crossover followed by mutation, or mutation alone.
"""

from __future__ import annotations

from enum import Enum
import random
from typing import TYPE_CHECKING, Sequence

from loguru import logger

from simple_ga.exceptions import ReproductionError
from simple_ga.genome import Genome, crossover, mutate_genome
from simple_ga.individual import Individual
from simple_ga.utils.rand import coin_toss

if TYPE_CHECKING:
    from simple_ga.engine.config import GAParams


class ReproductionStrategy(str, Enum):
    CROSSOVER = "crossover"  # two parents, crossover then mutation
    MUTATION = "mutation"  # one parent, mutation only


def choose_strategy(crossover_rate: float, rng: random.Random) -> ReproductionStrategy:
    """Pick CROSSOVER with probability *crossover_rate*, otherwise MUTATION."""
    if coin_toss(rng, crossover_rate):
        return ReproductionStrategy.CROSSOVER
    return ReproductionStrategy.MUTATION


def breed_child(
    parent_genomes: Sequence[Genome],
    strategy: ReproductionStrategy,
    mutation_rate: float,
    rng: random.Random,
) -> Individual:
    """Produce one unevaluated child using *strategy*.

    Parents are drawn uniformly with replacement, so crossover may pair a
    genome with itself.
    """
    if strategy is ReproductionStrategy.CROSSOVER:
        first = rng.choice(parent_genomes)
        second = rng.choice(parent_genomes)
        genome = crossover(first, second, rng)
    else:
        genome = rng.choice(parent_genomes)
    return Individual(genome=mutate_genome(genome, mutation_rate, rng))


def reproduce(
    parents: Sequence[Individual], params: GAParams, rng: random.Random
) -> list[Individual]:
    """Return a population of exactly ``params.population_size`` individuals.

    The parents come first, unchanged; every further slot is filled by an
    independent trial of :func:`choose_strategy` and :func:`breed_child`.
    """
    if not parents:
        raise ReproductionError("Cannot reproduce from an empty parent pool")
    if len(parents) > params.population_size:
        raise ReproductionError(
            f"{len(parents)} parents exceed population_size={params.population_size}"
        )

    parent_genomes = [parent.genome for parent in parents]
    next_generation = list(parents)
    counts = {strategy: 0 for strategy in ReproductionStrategy}

    while len(next_generation) < params.population_size:
        strategy = choose_strategy(params.crossover_rate, rng)
        next_generation.append(
            breed_child(parent_genomes, strategy, params.mutation_rate, rng)
        )
        counts[strategy] += 1

    logger.debug(
        "[reproduce] {} parents + {} crossover + {} mutation-only children",
        len(parents),
        counts[ReproductionStrategy.CROSSOVER],
        counts[ReproductionStrategy.MUTATION],
    )
    return next_generation
