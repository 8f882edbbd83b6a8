from hydra import compose, initialize
import pytest

from simple_ga.config import build_evaluator, build_params
from simple_ga.evaluation import EvaluationBackend, Evaluator
from simple_ga.exceptions import UnknownFitnessFunction
from simple_ga.fitness_functions import leading_ones, max_ones


def _compose(*overrides):
    with initialize(version_base=None, config_path="../config"):
        return compose(config_name="config", overrides=list(overrides))


def test_default_config_builds_params():
    params = build_params(_compose())
    assert params.genome_size == 16
    assert params.population_size == 100
    assert params.num_generations == 50
    assert params.num_parents == 5
    assert params.crossover_rate == 0.75
    assert params.mutation_rate == 0.1
    assert params.fitness_function is max_ones
    assert params.seed is None


def test_overrides_reach_params():
    cfg = _compose("fitness=leading_ones", "params.genome_size=8", "params.seed=3")
    params = build_params(cfg)
    assert params.fitness_function is leading_ones
    assert params.genome_size == 8
    assert params.seed == 3


def test_unknown_fitness_name():
    with pytest.raises(UnknownFitnessFunction):
        build_params(_compose("fitness=nope"))


def test_build_evaluator():
    evaluator = build_evaluator(_compose("evaluator.backend=serial"))
    assert isinstance(evaluator, Evaluator)
    assert evaluator.backend is EvaluationBackend.SERIAL
