from datetime import datetime, timezone
import sys
import time

from dotenv import load_dotenv
import hydra
from loguru import logger
from omegaconf import DictConfig

from simple_ga.config import build_evaluator, build_params
from simple_ga.engine import evolve
from simple_ga.evaluation import Evaluator
from simple_ga.exceptions import UnknownFitnessFunction
from simple_ga.utils.logger_setup import setup_logger


def run_experiment(cfg: DictConfig) -> int:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("Simple GA run")
    logger.info("=" * 80)
    logger.info(f"Fitness function: {cfg.fitness}")
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    evaluator: Evaluator | None = None
    try:
        try:
            params = build_params(cfg)
        except UnknownFitnessFunction:
            logger.error(f"unknown fitness function: {cfg.fitness}")
            return 1

        evaluator = build_evaluator(cfg)
        best = evolve(params, evaluator=evaluator)
        print(best)
        return 0

    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        return 130
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Run failed: {e}")
        raise
    finally:
        if evaluator is not None:
            evaluator.close()
        duration = time.time() - start_time
        logger.info(f"Total run duration: {duration:.2f} seconds")
        logger.info(f"End time: {datetime.now(timezone.utc).isoformat()}")


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Run the GA on the configured fitness function and print the best individual."""
    load_dotenv()

    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info(f"Log file: {log_file_path}")
    exit_code = run_experiment(cfg)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
