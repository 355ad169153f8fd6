import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("sumup")


def setup_logging(debug: Optional[bool] = None) -> None:
    """Configure the ``sumup`` logger.

    Installs a single stream handler on stderr. Calling it again only adjusts
    the level and rebinds the handler to the current ``sys.stderr``, so
    repeated client construction does not duplicate output.
    """
    level = logging.DEBUG if debug else logging.INFO

    handler = next(
        (h for h in logger.handlers if getattr(h, "_sumup_handler", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._sumup_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)  # type: ignore[attr-defined]

    logger.setLevel(level)
    logger.propagate = False
