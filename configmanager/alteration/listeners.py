from threading import Lock
from typing import Callable, Iterator, Mapping

from loguru import logger


# Called with a read-only mapping of exactly the keys changed by one alteration.
ConfigurationChangeListener = Callable[[Mapping[str, str]], None]


class ListenerRegistry:
    """Insertion-ordered, copy-on-write list of change listeners.

    Writers replace the underlying tuple under a lock; readers iterate over
    whichever tuple was current when they started, so concurrent add/remove
    never disturbs an iteration in progress.
    """

    def __init__(self):
        self._listeners: tuple[ConfigurationChangeListener, ...] = ()
        self._lock = Lock()

    def add(self, listener: ConfigurationChangeListener) -> None:
        with self._lock:
            self._listeners = self._listeners + (listener,)

    def remove(self, listener: ConfigurationChangeListener) -> bool:
        """Remove the first registration of a listener. Returns False if absent."""
        with self._lock:
            listeners = list(self._listeners)
            try:
                listeners.remove(listener)
            except ValueError:
                return False
            self._listeners = tuple(listeners)
            return True

    def clear(self) -> None:
        with self._lock:
            self._listeners = ()

    def snapshot(self) -> tuple[ConfigurationChangeListener, ...]:
        return self._listeners

    def __iter__(self) -> Iterator[ConfigurationChangeListener]:
        return iter(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)


def notify_listeners(
    listeners: tuple[ConfigurationChangeListener, ...],
    changes: Mapping[str, str],
) -> None:
    """Call every listener in order. A failing listener is logged and skipped."""
    for listener in listeners:
        try:
            listener(changes)
        except Exception as e:
            logger.warning(f"Configuration change listener {listener!r} failed: {e}")
