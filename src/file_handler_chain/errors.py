from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "ChainError",
    "ConfigurationError",
    "NoHandlerFound",
]


class ChainError(RuntimeError):
    """
    Base class for every failure raised by the handler chain itself.
    """


class ConfigurationError(ChainError):
    """
    Raised while assembling a chain (e.g., empty handler set, relinking a node).

    Not retried: it should abort whatever startup step is building the chain.
    """


class NoHandlerFound(ChainError):
    """
    Raised when no handler in the chain accepts the dispatched key.

    :param key: The key nobody matched.
    :param message: Optional override for the default message.
    """

    def __init__(self, key: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"No handler found for: {key}")
        self.key = key
