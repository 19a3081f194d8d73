"""
file_handlers.py - concrete handlers that "open" files of one type each.

One handler per FileType. A handler matches a file name when the name's suffix
resolves to its type; the set is mutually exclusive because FileType suffixes
do not overlap.
"""

from __future__ import annotations

import logging

from file_handler_chain.file_types import FileType
from file_handler_chain.handler import Handler
from file_handler_chain.messages import OPEN_FILE

__all__ = [
    "FileHandler",
    "TextFileHandler",
    "DocFileHandler",
    "PdfFileHandler",
    "HANDLERS_BY_TYPE",
]

logger = logging.getLogger(__name__)


class FileHandler(Handler):
    """
    Base handler for a single file type.

    Subclasses only declare `file_type`.
    """

    file_type: FileType

    def matches(self, key: str) -> bool:
        return FileType.from_file_name(key) is self.file_type

    def act(self, key: str) -> str:
        """
        Opens the file (demo: logs and returns the message).

        :param key: File name.
        :return: The "Opening ..." message.
        """
        logger.info(OPEN_FILE, self.file_type.name, key)
        return OPEN_FILE % (self.file_type.name, key)


class TextFileHandler(FileHandler):
    file_type = FileType.TXT


class DocFileHandler(FileHandler):
    file_type = FileType.DOC


class PdfFileHandler(FileHandler):
    file_type = FileType.PDF


HANDLERS_BY_TYPE: dict[FileType, type[FileHandler]] = {
    FileType.TXT: TextFileHandler,
    FileType.DOC: DocFileHandler,
    FileType.PDF: PdfFileHandler,
}
