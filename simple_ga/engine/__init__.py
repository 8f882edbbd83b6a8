from __future__ import annotations

from simple_ga.engine.config import FitnessFunction, GAParams
from simple_ga.engine.core import (
    GeneticAlgorithm,
    best_individual,
    evolve,
    run_generation,
)
from simple_ga.engine.metrics import EvolutionMetrics, GenerationStats
