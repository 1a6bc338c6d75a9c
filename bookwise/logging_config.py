import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls only adjust the level.

    AWS Lambda installs its own root handler before any code runs, in which
    case ``basicConfig`` does nothing and only the level is applied.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)
