from __future__ import annotations

import logging

from file_handler_chain.errors import NoHandlerFound
from file_handler_chain.handler import ChainLink
from file_handler_chain.messages import NO_HANDLER_FOUND, PROCESSING_COMPLETE

__all__ = ["FileProcessingService"]

logger = logging.getLogger(__name__)


class FileProcessingService:
    """
    Entry point for callers that want a file processed by the handler chain.

    :param chain: Head of an already built chain.
    """

    def __init__(self, chain: ChainLink) -> None:
        self._chain = chain

    def process_file(self, file_name: str) -> str:
        """
        Routes `file_name` through the chain.

        :param file_name: Name of the file to open.
        :return: Completion message.
        :raises NoHandlerFound: If no handler supports the file; errors from the
                                handler's action propagate as-is.
        """
        try:
            self._chain.dispatch(file_name)
        except NoHandlerFound as exc:
            raise NoHandlerFound(file_name, NO_HANDLER_FOUND + file_name) from exc
        logger.info("%s%s", PROCESSING_COMPLETE, file_name)
        return PROCESSING_COMPLETE + file_name
