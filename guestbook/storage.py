import logging
import threading

from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

logger = logging.getLogger("uvicorn")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """
    A single guestbook entry. Immutable once created.
    """

    id: int
    text: Any
    timestamp: str


class MessageStore:
    """
    Thread-safe in-memory, insertion-ordered message log.
    """

    def __init__(
        self,
        max_messages: Optional[int] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            max_messages (Optional[int]): History cap. None keeps every message.
            clock (Callable[[], datetime]): Source of the current aware datetime.
        """
        if max_messages is not None and max_messages <= 0:
            raise ValueError("max_messages must be a positive integer or None")

        self._messages: deque[Message] = deque(maxlen=max_messages)
        self._last_id: int = 0
        self._clock = clock

        self._lock = threading.Lock()

    def append(self, text: Any) -> Message:
        """
        Stamps and appends a message to the tail of the log.

        Args:
            text (Any): The submitted content, stored verbatim.

        Returns:
            Message: The newly created message.
        """
        with self._lock:
            now = self._clock()
            msg_id = max(_to_millis(now), self._last_id + 1)
            self._last_id = msg_id

            message = Message(id=msg_id, text=text, timestamp=_to_iso(now))
            self._messages.append(message)

        logger.info(f"[Storage] Assigned ID={msg_id}")
        return message

    def list(self) -> list[Message]:
        """
        Retrieves a snapshot of all stored messages, oldest first.
        """
        with self._lock:
            snapshot = list(self._messages)

        logger.debug(f"[Storage] Returning {len(snapshot)} messages")
        return snapshot

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


def _to_millis(moment: datetime) -> int:
    return (moment - EPOCH) // timedelta(milliseconds=1)


def _to_iso(moment: datetime) -> str:
    # 2026-10-18T12:00:00.123Z
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
