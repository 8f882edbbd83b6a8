from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simple_ga.exceptions import UnevaluatedIndividualError
from simple_ga.genome import Genome

# Scores are only ever compared, so ints keep their full precision.
Fitness = int | float


class Individual(BaseModel):
    """A candidate solution: a genome and its (possibly unset) fitness."""

    genome: Genome = Field(..., description="Bit string, one int per locus")
    fitness: Fitness | None = Field(
        default=None, description="Fitness score, None until evaluated"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("genome")
    @classmethod
    def validate_bits(cls, v: Genome) -> Genome:
        """Reject genomes holding anything but 0 and 1."""
        if any(bit not in (0, 1) for bit in v):
            raise ValueError("Genome bits must be 0 or 1")
        return v

    @property
    def is_evaluated(self) -> bool:
        return self.fitness is not None

    def with_fitness(self, fitness: Fitness) -> Individual:
        """Return a copy carrying *fitness*, replacing any previous value."""
        return self.model_copy(update={"fitness": fitness})

    def require_fitness(self) -> Fitness:
        """Return the fitness, failing loudly if the individual is unevaluated."""
        if self.fitness is None:
            raise UnevaluatedIndividualError(
                f"Individual {self.bitstring()} has no fitness; evaluate it first"
            )
        return self.fitness

    def bitstring(self) -> str:
        return "".join(str(bit) for bit in self.genome)

    def to_dict(self) -> dict[str, Any]:
        """Convert the individual to a JSON-friendly dictionary."""
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        fitness = "unevaluated" if self.fitness is None else str(self.fitness)
        return f"Individual(genome={self.bitstring()}, fitness={fitness})"
