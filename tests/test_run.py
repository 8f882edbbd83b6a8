from hydra import compose, initialize

from run import run_experiment


def _compose(*overrides):
    with initialize(version_base=None, config_path="../config"):
        return compose(config_name="config", overrides=list(overrides))


def test_run_prints_best_individual(capsys):
    cfg = _compose(
        "params.genome_size=6",
        "params.population_size=10",
        "params.num_generations=3",
        "params.num_parents=2",
        "params.seed=5",
        "evaluator.backend=serial",
    )
    assert run_experiment(cfg) == 0
    out = capsys.readouterr().out
    assert out.startswith("Individual(genome=")


def test_run_reports_unknown_fitness_function(capsys):
    assert run_experiment(_compose("fitness=nope")) == 1
    assert capsys.readouterr().out == ""
