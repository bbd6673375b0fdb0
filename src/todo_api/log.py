from logging import basicConfig, getLogger

logger = getLogger("todo-api")


def configure_logging(level: str = "INFO") -> None:
    basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.setLevel(level)
