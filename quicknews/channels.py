"""Channels between the display layer and the background worker.

Control messages flow consumer to worker through a capacity-1 channel: a send
waits until the worker has finished handling the previous message, so at most
one intent is ever pending. News items flow worker to consumer through an
unbounded channel that the consumer drains without blocking.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import List, Optional

from .models import ControlMessage, NewsItem


class ChannelClosed(Exception):
    """Raised when sending to a worker that has stopped."""


class ControlSender:
    def __init__(self, channel: "queue.Queue[ControlMessage]", closed: threading.Event) -> None:
        self._channel = channel
        self._closed = closed

    def send(self, message: ControlMessage) -> None:
        """Block until the previous message is processed, then enqueue ``message``.

        Raises ``ChannelClosed`` once the receiving worker has stopped.
        """
        if self._closed.is_set():
            raise ChannelClosed("news worker has stopped")
        self._channel.join()
        if self._closed.is_set():
            raise ChannelClosed("news worker has stopped")
        self._channel.put(message)
        if self._closed.is_set():
            # closed while we were putting; nobody will ever take it
            _discard(self._channel)
            raise ChannelClosed("news worker has stopped")


def _discard(channel: "queue.Queue[ControlMessage]") -> None:
    while True:
        try:
            channel.get_nowait()
        except queue.Empty:
            return
        channel.task_done()


class ControlReceiver:
    def __init__(self, channel: "queue.Queue[ControlMessage]", closed: threading.Event) -> None:
        self._channel = channel
        self._closed = closed

    def receive(self, timeout: Optional[float] = None) -> Optional[ControlMessage]:
        """Return the next message, or ``None`` if none arrives within ``timeout``."""
        try:
            return self._channel.get(timeout=timeout)
        except queue.Empty:
            return None

    def done(self) -> None:
        """Mark the last received message as fully handled, releasing a waiting sender."""
        self._channel.task_done()

    def close(self) -> None:
        """Refuse further sends and release every sender still waiting."""
        self._closed.set()
        _discard(self._channel)


class NewsSender:
    def __init__(self, channel: "queue.Queue[NewsItem]") -> None:
        self._channel = channel

    def send(self, item: NewsItem) -> None:
        self._channel.put_nowait(item)


class NewsReceiver:
    def __init__(self, channel: "queue.Queue[NewsItem]") -> None:
        self._channel = channel

    def try_take(self) -> Optional[NewsItem]:
        """Return the next item if one is available, without waiting."""
        try:
            return self._channel.get_nowait()
        except queue.Empty:
            return None

    def drain(self) -> List[NewsItem]:
        items: List[NewsItem] = []
        while (item := self.try_take()) is not None:
            items.append(item)
        return items


@dataclass(frozen=True)
class ChannelBridge:
    """Both channels, with each endpoint ready to hand to its owner."""

    control_tx: ControlSender
    control_rx: ControlReceiver
    news_tx: NewsSender
    news_rx: NewsReceiver

    @classmethod
    def create(cls) -> "ChannelBridge":
        control: "queue.Queue[ControlMessage]" = queue.Queue(maxsize=1)
        closed = threading.Event()
        news: "queue.Queue[NewsItem]" = queue.Queue()
        return cls(
            control_tx=ControlSender(control, closed),
            control_rx=ControlReceiver(control, closed),
            news_tx=NewsSender(news),
            news_rx=NewsReceiver(news),
        )
