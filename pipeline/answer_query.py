"""Answer workdays queries from the command line — logs every step"""
import sys
import logging
from pathlib import Path

# Project root setup
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from workdays_between.engine import WorkdaysEngine
from workdays_between.pipeline_config import PipelineConfig, load_config


def setup_logging(config: PipelineConfig) -> logging.Logger:

    """Configure console (+ optional file) logging"""

    logger = logging.getLogger("workdays")
    logger.setLevel(config.log_level)
    logger.handlers.clear()

    fmt       = logging.Formatter("[%(asctime)s] %(levelname)-8s %(message)s", datefmt="%H:%M:%S")
    console_h = logging.StreamHandler(sys.stderr)

    console_h.setFormatter(fmt)
    logger.addHandler(console_h)

    if config.log_file:
        file_h = logging.FileHandler(config.log_file, mode='a', encoding='utf-8')
        file_h.setFormatter(fmt)
        logger.addHandler(file_h)

    return logger


def read_queries(argv: list[str]) -> list[str]:

    """One query from argv, otherwise one per non-empty stdin line"""

    if argv:
        return [" ".join(argv)]

    return [line.strip() for line in sys.stdin if line.strip()]


def run(argv: list[str]) -> int:

    """Main entrypoint — exit status 1 when any query had no answer"""

    config = load_config(ROOT / '.env')
    logger = setup_logging(config)
    engine = WorkdaysEngine(config)

    unanswered = 0

    for query in read_queries(argv):
        text = engine.answer_text(query, logger=logger)

        if text is None:
            unanswered += 1
            print("No answer")
        else:
            print(text)

    return 1 if unanswered else 0


if __name__ == "__main__":
    sys.exit(run(sys.argv[1:]))
