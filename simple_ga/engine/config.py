from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from simple_ga.genome import Genome
from simple_ga.individual import Fitness

FitnessFunction = Callable[[Genome], Fitness]


class GAParams(BaseModel):
    """Immutable parameters of one genetic-algorithm run."""

    genome_size: int = Field(..., ge=1, description="Number of bits per genome")
    population_size: int = Field(
        ..., ge=1, description="Individuals per generation"
    )
    num_generations: int = Field(
        ..., ge=0, description="Generations to run before picking the best"
    )
    num_parents: int = Field(
        ..., ge=1, description="Individuals kept by truncation selection"
    )
    crossover_rate: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Probability that a child comes from crossover rather than mutation only",
    )
    mutation_rate: float = Field(
        ..., ge=0.0, le=1.0, description="Per-bit flip probability"
    )
    fitness_function: FitnessFunction = Field(
        ..., description="Scores a genome; higher is better"
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the run's random source (None = OS entropy)",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def check_parents_fit(self) -> GAParams:
        if self.num_parents > self.population_size:
            raise ValueError(
                f"num_parents ({self.num_parents}) cannot exceed "
                f"population_size ({self.population_size})"
            )
        return self
