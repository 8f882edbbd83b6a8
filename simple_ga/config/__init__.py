from simple_ga.config.helpers import build_evaluator, build_params

__all__ = [
    "build_evaluator",
    "build_params",
]
