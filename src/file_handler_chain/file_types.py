from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = ["FileType"]


class FileType(Enum):
    """Supported file categories, keyed by file-name suffix."""
    TXT = ".txt"
    DOC = ".doc"
    PDF = ".pdf"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_file_name(cls, file_name: str) -> Optional[FileType]:
        """
        Resolves the type of a file by its suffix (case-sensitive).

        :param file_name: File name, e.g. "report.doc".
        :return: The first matching FileType, or None if the suffix is unsupported.
        """
        for file_type in cls:
            if file_name.endswith(file_type.extension):
                return file_type
        return None
