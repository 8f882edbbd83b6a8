import random

import pytest

from simple_ga.engine.config import GAParams
from simple_ga.fitness_functions import max_ones


class ScriptedRandom(random.Random):
    """A Random whose ``random()`` and ``randint()`` replay fixed values.

    Anything not scripted falls through to the seeded base generator.
    """

    def __init__(self, randoms=(), randints=(), seed=0):
        super().__init__(seed)
        self._randoms = list(randoms)
        self._randints = list(randints)
        self.randint_calls = []

    def random(self):
        if self._randoms:
            return self._randoms.pop(0)
        return super().random()

    def randint(self, a, b):
        self.randint_calls.append((a, b))
        if self._randints:
            return self._randints.pop(0)
        return super().randint(a, b)

    def getrandbits(self, k):
        # Keeps choice/randrange on the bit-based path instead of random().
        return super().getrandbits(k)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_params():
    def _make(**overrides) -> GAParams:
        values = dict(
            genome_size=8,
            population_size=20,
            num_generations=5,
            num_parents=3,
            crossover_rate=0.75,
            mutation_rate=0.05,
            fitness_function=max_ones,
        )
        values.update(overrides)
        return GAParams(**values)

    return _make
