from concurrent.futures import ThreadPoolExecutor
import time

import pytest

from simple_ga.evaluation import (
    EvaluationBackend,
    Evaluator,
    evaluate_individual,
    evaluate_population,
)
from simple_ga.fitness_functions import max_ones
from simple_ga.individual import Individual


def _population():
    return [
        Individual(genome=(1, 1, 1, 0)),
        Individual(genome=(0, 0, 0, 0)),
        Individual(genome=(1, 0, 0, 0), fitness=99.0),
        Individual(genome=(1, 1, 1, 1)),
    ]


def _slow_for_low_scores(genome):
    # Later-submitted, fitter genomes finish first.
    time.sleep(0.02 * (len(genome) - sum(genome)))
    return sum(genome)


def _failing(genome):
    if sum(genome) == 0:
        raise RuntimeError("bad genome")
    return sum(genome)


def test_evaluate_individual_sets_fitness():
    ind = evaluate_individual(Individual(genome=(1, 0, 1)), max_ones)
    assert ind.fitness == 2.0


def test_evaluate_individual_overwrites_stale_fitness():
    ind = evaluate_individual(Individual(genome=(1, 0, 1), fitness=10.0), max_ones)
    assert ind.fitness == 2.0


def test_evaluate_population_inline():
    evaluated = evaluate_population(_population(), max_ones)
    assert [ind.fitness for ind in evaluated] == [3.0, 0.0, 1.0, 4.0]


def test_evaluate_population_preserves_order_with_executor():
    population = _population()
    with ThreadPoolExecutor(max_workers=4) as executor:
        evaluated = evaluate_population(population, _slow_for_low_scores, executor)
    assert [ind.genome for ind in evaluated] == [ind.genome for ind in population]
    assert [ind.fitness for ind in evaluated] == [3.0, 0.0, 1.0, 4.0]


def test_evaluate_population_does_not_modify_input():
    population = _population()
    evaluate_population(population, max_ones)
    assert [ind.fitness for ind in population] == [None, None, 99.0, None]


def test_fitness_errors_propagate_inline():
    with pytest.raises(RuntimeError, match="bad genome"):
        evaluate_population(_population(), _failing)


@pytest.mark.parametrize("backend", ["serial", "thread"])
def test_fitness_errors_propagate_from_evaluator(backend):
    with Evaluator(backend=backend, max_workers=2) as evaluator:
        with pytest.raises(RuntimeError, match="bad genome"):
            evaluator.evaluate(_population(), _failing)


def test_serial_evaluator_has_no_pool():
    evaluator = Evaluator(backend=EvaluationBackend.SERIAL)
    assert [i.fitness for i in evaluator.evaluate(_population(), max_ones)] == [
        3,
        0,
        1,
        4,
    ]
    assert not evaluator.is_open


def test_thread_pool_is_reused_and_released():
    evaluator = Evaluator(backend="thread", max_workers=2)
    assert not evaluator.is_open
    evaluator.evaluate(_population(), max_ones)
    assert evaluator.is_open
    evaluator.evaluate(_population(), max_ones)
    assert evaluator.is_open

    evaluator.close()
    assert not evaluator.is_open
    evaluator.close()


def test_evaluator_reopens_after_close():
    evaluator = Evaluator(backend="thread", max_workers=2)
    evaluator.evaluate(_population(), max_ones)
    evaluator.close()
    evaluated = evaluator.evaluate(_population(), max_ones)
    assert [ind.fitness for ind in evaluated] == [3, 0, 1, 4]
    assert evaluator.is_open
    evaluator.close()


def test_context_manager_closes_pool():
    with Evaluator() as evaluator:
        evaluator.evaluate(_population(), max_ones)
        assert evaluator.is_open
    assert not evaluator.is_open


def test_process_backend_matches_inline_results():
    with Evaluator(backend="process", max_workers=2) as evaluator:
        evaluated = evaluator.evaluate(_population(), max_ones)
    assert [ind.fitness for ind in evaluated] == [3.0, 0.0, 1.0, 4.0]


def test_invalid_backend_is_rejected():
    with pytest.raises(ValueError):
        Evaluator(backend="gpu")
