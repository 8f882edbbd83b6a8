"""Tiny helper functions for Hydra config computations."""

from hydra.utils import instantiate
from omegaconf import DictConfig

from simple_ga.engine.config import GAParams
from simple_ga.evaluation import Evaluator
from simple_ga.fitness_functions import resolve_fitness_function


def build_params(cfg: DictConfig) -> GAParams:
    """Instantiate ``cfg.params`` with the fitness function named by ``cfg.fitness``."""
    return instantiate(
        cfg.params, fitness_function=resolve_fitness_function(cfg.fitness)
    )


def build_evaluator(cfg: DictConfig) -> Evaluator:
    """Instantiate the evaluator described by ``cfg.evaluator``."""
    return instantiate(cfg.evaluator)
