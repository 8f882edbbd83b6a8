from __future__ import annotations

import random
from typing import Callable, Iterable, Sequence

from loguru import logger

from simple_ga.engine.config import GAParams
from simple_ga.engine.metrics import EvolutionMetrics, GenerationStats
from simple_ga.evaluation import Evaluator, evaluate_population
from simple_ga.individual import Individual
from simple_ga.population import generate_population
from simple_ga.reproduction import reproduce
from simple_ga.selection import ParentSelector, TruncationSelector, select_parents
from simple_ga.utils.rand import make_rng

__all__ = ["GeneticAlgorithm", "best_individual", "evolve", "run_generation"]

GenerationListener = Callable[[GenerationStats], None]
SelectionHook = Callable[[list[Individual], list[Individual]], None]


def best_individual(population: Sequence[Individual]) -> Individual:
    """Return the fittest individual; ties go to the earliest one."""
    return max(population, key=Individual.require_fitness)


def run_generation(
    population: Sequence[Individual],
    params: GAParams,
    rng: random.Random,
    evaluator: Evaluator | None = None,
    selector: ParentSelector | None = None,
    on_selection: SelectionHook | None = None,
) -> list[Individual]:
    """Evaluate, select and reproduce: one generation's state transition.

    *selector* defaults to truncation selection of ``params.num_parents``.
    *on_selection* receives the evaluated population and the chosen parents
    before reproduction.
    """
    if evaluator is None:
        evaluated = evaluate_population(population, params.fitness_function)
    else:
        evaluated = evaluator.evaluate(population, params.fitness_function)
    if selector is None:
        parents = select_parents(evaluated, params.num_parents)
    else:
        parents = selector(evaluated)
    if on_selection is not None:
        on_selection(evaluated, parents)
    return reproduce(parents, params, rng)


class GeneticAlgorithm:
    """
    Fixed-length generational loop:
    - State is (generations remaining, population), starting from a random population.
    - Each generation evaluates, selects parents and reproduces; parents survive unchanged.
    - When the counter hits zero the final population is evaluated once more and
      its best individual is returned.
    """

    def __init__(
        self,
        params: GAParams,
        *,
        evaluator: Evaluator | None = None,
        rng: random.Random | None = None,
        selector: ParentSelector | None = None,
    ):
        self.params = params
        self.rng = rng if rng is not None else make_rng(params.seed)
        self._owns_evaluator = evaluator is None
        self.evaluator = evaluator if evaluator is not None else Evaluator()
        self.selector = selector or TruncationSelector(params.num_parents)
        self.metrics = EvolutionMetrics()
        self._listeners: list[GenerationListener] = []

        logger.info(
            "[GeneticAlgorithm] Init | genome_size={}, population_size={}, "
            "generations={}, parents={}, crossover_rate={}, mutation_rate={}, evaluator={}",
            params.genome_size,
            params.population_size,
            params.num_generations,
            params.num_parents,
            params.crossover_rate,
            params.mutation_rate,
            self.evaluator.backend.value,
        )

    def add_listener(self, listener: GenerationListener) -> None:
        """Call *listener* with the stats of every completed generation."""
        self._listeners.append(listener)

    def step(
        self, population: Sequence[Individual], generation: int
    ) -> list[Individual]:
        selections: list[tuple[GenerationStats, int]] = []

        def record(evaluated: list[Individual], parents: list[Individual]) -> None:
            stats = GenerationStats.from_generation(generation, evaluated, parents)
            selections.append((stats, len(parents)))

        next_population = run_generation(
            population,
            self.params,
            self.rng,
            self.evaluator,
            selector=self.selector,
            on_selection=record,
        )

        stats, num_parents = selections[0]
        self.metrics.record_generation(
            stats,
            evaluated=len(population),
            children=len(next_population) - num_parents,
        )
        logger.debug(
            "[GeneticAlgorithm] Generation {} | best={}, worst={}, parent_best={}",
            generation,
            stats.best_fitness,
            stats.worst_fitness,
            stats.parent_best_fitness,
        )
        for listener in self._listeners:
            listener(stats)
        return next_population

    def run(self) -> Individual:
        total = self.params.num_generations
        generations_remaining = total
        population = generate_population(self.params, self.rng)

        try:
            while generations_remaining > 0:
                generation = total - generations_remaining + 1
                logger.info("[GeneticAlgorithm] Generation {} of {}", generation, total)
                population = self.step(population, generation)
                generations_remaining -= 1

            # Children carry no fitness yet and parents may carry stale scores.
            final = self.evaluator.evaluate(population, self.params.fitness_function)
            self.metrics.record_final_evaluation(len(final))
            best = best_individual(final)
        finally:
            if self._owns_evaluator:
                self.evaluator.close()

        logger.info(
            "[GeneticAlgorithm] Done | best={}, evaluations={}",
            best,
            self.metrics.evaluations,
        )
        return best


def evolve(
    params: GAParams,
    *,
    evaluator: Evaluator | None = None,
    rng: random.Random | None = None,
    listeners: Iterable[GenerationListener] = (),
) -> Individual:
    """Run a genetic algorithm with *params* and return the best final individual."""
    engine = GeneticAlgorithm(params, evaluator=evaluator, rng=rng)
    for listener in listeners:
        engine.add_listener(listener)
    return engine.run()
