import logging
import sys

logger = logging.getLogger("jsonhttp")


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the ``jsonhttp`` logger.

    Calling it more than once only updates the level.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_jsonhttp", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handler._jsonhttp = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
