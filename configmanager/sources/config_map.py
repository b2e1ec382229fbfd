from threading import RLock
from typing import Dict, Iterator, Mapping, MutableMapping


class ConfigMap(MutableMapping[str, str]):
    """Lock-guarded mutable mapping used as a source's base layer.

    Single-key reads and writes are independent. ``update()`` writes a whole
    batch under one lock acquisition and ``copy()`` returns a consistent
    snapshot. Iteration walks a snapshot of the keys.
    """

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = RLock()

    def __getitem__(self, key: str) -> str:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def __delitem__(self, key: str) -> None:
        with self._lock:
            del self._data[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            keys = list(self._data)
        return iter(keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def update(self, other=(), /, **kwargs) -> None:
        with self._lock:
            self._data.update(other, **kwargs)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def replace(self, values: Mapping[str, str]) -> None:
        """Swap the whole contents for ``values`` under one lock acquisition."""
        with self._lock:
            self._data = dict(values)

    def copy(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._data)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} size={len(self)}>"
