import logging
import sys

logger = logging.getLogger("mealmate")


def setup_logging(debug: bool = False) -> None:
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    existing = [h for h in logger.handlers if getattr(h, "_mealmate_handler", False)]
    if existing:
        # stderr may have been swapped since the first call
        existing[0].stream = sys.stderr  # type: ignore[attr-defined]
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        handler._mealmate_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
