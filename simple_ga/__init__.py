"""Generational genetic algorithm over bit-string genomes."""

from simple_ga.engine import GAParams, GeneticAlgorithm, evolve, run_generation
from simple_ga.evaluation import Evaluator, evaluate_individual, evaluate_population
from simple_ga.genome import Genome, crossover, flip_bit, mutate_genome
from simple_ga.individual import Individual
from simple_ga.population import generate_population
from simple_ga.reproduction import reproduce
from simple_ga.selection import select_parents

__all__ = [
    "Evaluator",
    "GAParams",
    "GeneticAlgorithm",
    "Genome",
    "Individual",
    "crossover",
    "evaluate_individual",
    "evaluate_population",
    "evolve",
    "flip_bit",
    "generate_population",
    "mutate_genome",
    "reproduce",
    "run_generation",
    "select_parents",
]
