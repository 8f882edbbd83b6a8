"""Fitness evaluation, optionally fanned out over a worker pool.

Evaluations are independent, so they may run concurrently. Results are always
collected in submission order, which keeps the output population aligned with
the input regardless of which worker finishes first.
"""

from __future__ import annotations

from concurrent.futures import (
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
)
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from loguru import logger
from pydantic import BaseModel, Field

from simple_ga.individual import Individual

if TYPE_CHECKING:
    from simple_ga.engine.config import FitnessFunction

__all__ = [
    "EvaluationBackend",
    "Evaluator",
    "EvaluatorConfig",
    "evaluate_individual",
    "evaluate_population",
]


class EvaluationBackend(str, Enum):
    SERIAL = "serial"
    THREAD = "thread"
    PROCESS = "process"


class EvaluatorConfig(BaseModel):
    """Worker-pool settings for fitness evaluation."""

    backend: EvaluationBackend = Field(
        default=EvaluationBackend.THREAD, description="Where evaluations run"
    )
    max_workers: int | None = Field(
        default=None, gt=0, description="Pool size (None = executor default)"
    )


def evaluate_individual(
    individual: Individual, fitness_function: FitnessFunction
) -> Individual:
    """Return a copy of *individual* scored by *fitness_function*.

    Any previous fitness is overwritten.
    """
    return individual.with_fitness(fitness_function(individual.genome))


def evaluate_population(
    population: Sequence[Individual],
    fitness_function: FitnessFunction,
    executor: Executor | None = None,
) -> list[Individual]:
    """Evaluate every individual, preserving population order.

    Without an *executor* the evaluations run inline. With one, every genome is
    submitted up front and the futures are drained in order; the first failure
    cancels whatever has not started yet and is re-raised unchanged.
    """
    if executor is None:
        return [evaluate_individual(ind, fitness_function) for ind in population]

    # Only genomes cross the worker boundary.
    futures: list[Future] = [
        executor.submit(fitness_function, ind.genome) for ind in population
    ]
    try:
        return [
            ind.with_fitness(future.result())
            for ind, future in zip(population, futures)
        ]
    except BaseException:
        for future in futures:
            future.cancel()
        raise


class Evaluator:
    """Owns the executor used for fitness evaluation.

    The pool is created on first use and reused across generations. Call
    :py:meth:`close` (or use the evaluator as a context manager) to release it.
    """

    def __init__(
        self,
        backend: EvaluationBackend | str = EvaluationBackend.THREAD,
        max_workers: int | None = None,
    ):
        self.config = EvaluatorConfig(backend=backend, max_workers=max_workers)
        self._executor: Executor | None = None

    @property
    def backend(self) -> EvaluationBackend:
        return self.config.backend

    @property
    def is_open(self) -> bool:
        """Whether a worker pool is currently running."""
        return self._executor is not None

    def _get_executor(self) -> Executor | None:
        if self.backend is EvaluationBackend.SERIAL:
            return None
        if self._executor is None:
            if self.backend is EvaluationBackend.PROCESS:
                self._executor = ProcessPoolExecutor(
                    max_workers=self.config.max_workers
                )
            else:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.config.max_workers,
                    thread_name_prefix="simple-ga-eval",
                )
            logger.debug(
                "[Evaluator] Created {} pool (max_workers={})",
                self.backend.value,
                self.config.max_workers or "default",
            )
        return self._executor

    def evaluate(
        self, population: Sequence[Individual], fitness_function: FitnessFunction
    ) -> list[Individual]:
        return evaluate_population(
            population, fitness_function, executor=self._get_executor()
        )

    def close(self) -> None:
        """Shut the pool down; a later :py:meth:`evaluate` starts a new one."""
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True, cancel_futures=True)
            logger.debug("[Evaluator] {} pool shut down", self.backend.value)

    def __enter__(self) -> Evaluator:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
