from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from file_handler_chain.chain_builder import build_chain
from file_handler_chain.errors import ConfigurationError
from file_handler_chain.file_handlers import HANDLERS_BY_TYPE
from file_handler_chain.file_types import FileType
from file_handler_chain.handler import ChainLink

__all__ = [
    "FileHandlerConfig",
    "file_handler_chain",
]


@dataclass(frozen=True)
class FileHandlerConfig:
    """
    Which file handlers make up the default chain, and in what order.

    :param file_types: Ordered file types; one handler is created per entry.
    """
    file_types: Tuple[FileType, ...] = (FileType.TXT, FileType.DOC, FileType.PDF)


def file_handler_chain(config: Optional[FileHandlerConfig] = None) -> ChainLink:
    """
    Builds the file handler chain described by `config`.

    :param config: Chain configuration; defaults to TXT -> DOC -> PDF.
    :return: Head of the chain.
    :raises ConfigurationError: If the config names no file types or an unknown one.
    """
    config = config or FileHandlerConfig()
    try:
        handlers = [HANDLERS_BY_TYPE[file_type]() for file_type in config.file_types]
    except KeyError as exc:
        raise ConfigurationError(f"No handler registered for file type: {exc.args[0]!r}") from exc
    return build_chain(handlers)
