from __future__ import annotations

import logging
from typing import Sequence

from file_handler_chain.errors import ConfigurationError
from file_handler_chain.handler import ChainLink, Handler
from file_handler_chain.messages import NO_HANDLERS_AVAILABLE

__all__ = ["build_chain"]

logger = logging.getLogger(__name__)


# ==========================
# Module: chain_builder
# Purpose: Turn an ordered handler collection into a linked chain, once, before
#          the head is handed to anybody who dispatches.
# ==========================


def build_chain(handlers: Sequence[Handler]) -> ChainLink:
    """
    Links each handler to the next one in the given order and returns the head.

    Order is taken as-is: no reordering, deduplication or cycle detection.
    Not safe to run concurrently with dispatches on the chain being built.

    :param handlers: Ordered, non-empty sequence of distinct handlers.
    :return: The head link of the chain.
    :raises ConfigurationError: If `handlers` is empty.
    """
    handlers = list(handlers)
    if not handlers:
        raise ConfigurationError(NO_HANDLERS_AVAILABLE)

    links = [ChainLink(handler) for handler in handlers]
    for current, nxt in zip(links, links[1:]):
        current._link(nxt)
        logger.debug("Linked %s -> %s", current.handler.name, nxt.handler.name)

    logger.info(
        "Built handler chain of %d: %s",
        len(links),
        " -> ".join(handler.name for handler in handlers),
    )
    return links[0]
