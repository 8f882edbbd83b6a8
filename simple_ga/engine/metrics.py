from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from simple_ga.individual import Fitness, Individual


class GenerationStats(BaseModel):
    """Fitness summary of one completed generation."""

    generation: int = Field(..., ge=1, description="1-based generation number")
    best_fitness: Fitness = Field(..., description="Best fitness in the population")
    worst_fitness: Fitness = Field(
        ..., description="Worst fitness in the population"
    )
    parent_best_fitness: Fitness = Field(
        ..., description="Best fitness in the selected parent pool"
    )

    @classmethod
    def from_generation(
        cls,
        generation: int,
        evaluated: Sequence[Individual],
        parents: Sequence[Individual],
    ) -> GenerationStats:
        scores = [ind.require_fitness() for ind in evaluated]
        return cls(
            generation=generation,
            best_fitness=max(scores),
            worst_fitness=min(scores),
            parent_best_fitness=max(p.require_fitness() for p in parents),
        )


class EvolutionMetrics(BaseModel):
    """Counters and per-generation history of a run."""

    total_generations: int = Field(
        default=0, description="Number of generations completed"
    )
    evaluations: int = Field(
        default=0, description="Total fitness function calls"
    )
    children_created: int = Field(
        default=0, description="Total individuals created by reproduction"
    )
    history: list[GenerationStats] = Field(
        default_factory=list, description="Stats of every completed generation"
    )

    def record_generation(
        self, stats: GenerationStats, evaluated: int, children: int
    ) -> None:
        """Record metrics from one generation."""
        self.total_generations += 1
        self.evaluations += evaluated
        self.children_created += children
        self.history.append(stats)

    def record_final_evaluation(self, evaluated: int) -> None:
        self.evaluations += evaluated

    def best_fitness_trend(self) -> list[Fitness]:
        return [stats.best_fitness for stats in self.history]
