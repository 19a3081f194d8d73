"""
Chain of Responsibility (Behavioral) - dispatch core.

Intent:
    Route a key through an ordered chain of handlers; the first handler that
    matches the key acts on it, every other handler is skipped.

Participants:
    - Handler (abstract): a capability pair {matches, act}. Knows nothing about
      its neighbours in the chain.
    - ChainLink: wraps one handler and an optional successor link. Links are
      created and connected only by the chain builder.
    - DispatchResult: what a successful dispatch returns.

Notes:
    - A chain is a finite singly-linked list; the last link has no successor.
    - Links are immutable once built. Relinking raises ConfigurationError.
    - If several handlers match the same key, chain order decides: first wins.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from file_handler_chain.errors import ConfigurationError, NoHandlerFound

__all__ = [
    "Handler",
    "DispatchResult",
    "ChainLink",
]

logger = logging.getLogger(__name__)


class Handler(ABC):
    """
    A single unit of capability in the chain.

    Handlers must be stateless with respect to the keys they see so that one
    built chain can be shared by concurrent callers.
    """

    @property
    def name(self) -> str:
        """
        :return: Name used in logs and results (the class name by default).
        """
        return type(self).__name__

    @abstractmethod
    def matches(self, key: Any) -> bool:
        """
        Decides whether this handler can act on `key`.

        Must be pure and deterministic: same key, same answer.

        :param key: The dispatched key.
        :return: True if `act` should be invoked for this key.
        """

    @abstractmethod
    def act(self, key: Any) -> Any:
        """
        Performs the handler's effect. Only called after `matches(key)` returned True.

        :param key: The dispatched key.
        :return: Any payload; the chain passes it back inside DispatchResult.
        """

    def __repr__(self) -> str:
        return f"{self.name}()"


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """
    Outcome of a successful dispatch.

    :ivar key: The key that was dispatched.
    :ivar handler: The handler that matched and acted.
    :ivar value: Whatever `handler.act(key)` returned.
    """
    key: Any
    handler: Handler
    value: Any = None

    @property
    def handled(self) -> bool:
        return True


class ChainLink:
    """
    One node of a built chain: a handler plus an optional successor link.

    :param handler: The handler evaluated at this position.
    """

    __slots__ = ("_handler", "_successor", "_linked")

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self._successor: Optional[ChainLink] = None
        self._linked = False

    @property
    def handler(self) -> Handler:
        return self._handler

    @property
    def successor(self) -> Optional[ChainLink]:
        """
        :return: Next link, or None when this link is terminal.
        """
        return self._successor

    def _link(self, successor: ChainLink) -> None:
        """
        Connects this link to its successor. Called by the builder only.

        :param successor: The next link in chain order.
        :raises ConfigurationError: If this link was already connected.
        """
        if self._linked:
            raise ConfigurationError(
                f"{self._handler.name} is already linked to {self._successor._handler.name}"
            )
        self._successor = successor
        self._linked = True

    def dispatch(self, key: Any) -> DispatchResult:
        """
        Walks the chain from this link and lets the first matching handler act.

        Exceptions raised by `act` propagate to the caller unchanged.

        :param key: The key to route.
        :return: DispatchResult for the handler that acted.
        :raises NoHandlerFound: If no handler in the chain matches the key.
        """
        link: Optional[ChainLink] = self
        while link is not None:
            handler = link._handler
            if handler.matches(key):
                return DispatchResult(key=key, handler=handler, value=handler.act(key))
            logger.debug("%s declined %r", handler.name, key)
            link = link._successor

        logger.warning("No handler in chain accepted %r", key)
        raise NoHandlerFound(key)

    def handlers(self) -> list[Handler]:
        """
        :return: Handlers from this link to the end of the chain, in order.
        """
        return [link._handler for link in self]

    def __iter__(self) -> Iterator[ChainLink]:
        link: Optional[ChainLink] = self
        while link is not None:
            yield link
            link = link._successor

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"ChainLink({' -> '.join(h.name for h in self.handlers())})"
