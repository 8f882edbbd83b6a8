from abc import ABC, abstractmethod
from typing import Sequence

from loguru import logger

from simple_ga.exceptions import SelectionError
from simple_ga.individual import Individual


def select_parents(
    population: Sequence[Individual], num_parents: int
) -> list[Individual]:
    """Return the *num_parents* fittest individuals (truncation selection).

    The sort is stable, so equally fit individuals keep their population order.
    Every individual must already be evaluated.
    """
    if num_parents < 0 or num_parents > len(population):
        raise SelectionError(
            f"Cannot select {num_parents} parents from {len(population)} individuals"
        )
    ranked = sorted(population, key=Individual.require_fitness, reverse=True)
    return ranked[:num_parents]


class ParentSelector(ABC):
    """Abstract base class for choosing the parents of the next generation."""

    @abstractmethod
    def __call__(self, population: Sequence[Individual]) -> list[Individual]:
        pass


class TruncationSelector(ParentSelector):
    """Keeps the top-K individuals by fitness."""

    def __init__(self, num_parents: int):
        if num_parents < 1:
            raise ValueError(f"num_parents must be at least 1, got {num_parents}")
        self.num_parents = num_parents

    def __call__(self, population: Sequence[Individual]) -> list[Individual]:
        parents = select_parents(population, self.num_parents)
        logger.debug(
            "TruncationSelector: kept {} of {} (fitness {}..{})",
            len(parents),
            len(population),
            parents[0].require_fitness(),
            parents[-1].require_fitness(),
        )
        return parents
