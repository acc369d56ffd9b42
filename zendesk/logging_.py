from __future__ import annotations

import logging


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    logging.getLogger("zendesk").setLevel(level)
    # make_client builds on httpx, which is chatty at DEBUG
    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("httpcore").setLevel(level)
