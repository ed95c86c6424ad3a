# topmark:header:start
#
#   project      : ApiMark
#   file         : messages.py
#   file_relpath : src/apimark/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message bus API contract.

`MessagesAPI` is the publish/subscribe surface documented by the API
specification: messages are scoped per window and topic, and a listener is
removed only by passing the very same listener object that was subscribed.

`LocalMessageBus` is a synchronous in-process implementation of the contract.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

from apimark.config.logging import get_logger

if TYPE_CHECKING:
    from apimark.config.logging import ApimarkLogger

logger: ApimarkLogger = get_logger(__name__)

Message = Union[str, dict[str, Any]]
Listener = Callable[..., Any]


@runtime_checkable
class MessagesAPI(Protocol):
    """Publish/subscribe messaging between windows."""

    def send(self, window_id: str, topic: str, message: Message) -> None:
        """Deliver ``message`` to the listeners of ``topic`` on ``window_id``."""
        ...

    def subscribe(self, window_id: str, topic: str, listener: Listener) -> None:
        """Register ``listener`` for ``topic`` messages sent to ``window_id``."""
        ...

    def unsubscribe(self, window_id: str, topic: str, listener: Listener) -> None:
        """Remove ``listener``; it must be the object passed to `subscribe`."""
        ...


class LocalMessageBus:
    """In-process `MessagesAPI` delivering messages synchronously.

    Listeners are called with ``(message, window_id)`` in subscription order.
    """

    def __init__(self) -> None:
        self._listeners: dict[tuple[str, str], list[Listener]] = {}

    def send(self, window_id: str, topic: str, message: Message) -> None:
        """Deliver ``message`` to the listeners of ``(window_id, topic)``."""
        listeners: list[Listener] = list(self._listeners.get((window_id, topic), []))
        logger.trace("send %s/%s to %d listener(s)", window_id, topic, len(listeners))
        for listener in listeners:
            listener(message, window_id)

    def subscribe(self, window_id: str, topic: str, listener: Listener) -> None:
        """Register ``listener`` for ``(window_id, topic)``."""
        self._listeners.setdefault((window_id, topic), []).append(listener)

    def unsubscribe(self, window_id: str, topic: str, listener: Listener) -> None:
        """Remove the first registration of this exact ``listener`` object.

        Equal but distinct listener objects are not removed.
        """
        listeners: list[Listener] = self._listeners.get((window_id, topic), [])
        for i, registered in enumerate(listeners):
            if registered is listener:
                del listeners[i]
                break
        else:
            logger.debug("unsubscribe: listener not registered for %s/%s", window_id, topic)
        if not listeners:
            self._listeners.pop((window_id, topic), None)
