import logging
import sys

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(debug: bool = False) -> None:
    """Attach a stream handler to the package logger.

    Calling it more than once does not stack handlers.
    """
    if not any(getattr(h, "_swagclient", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._swagclient = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
