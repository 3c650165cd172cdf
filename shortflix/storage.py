import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Union

from .config import FAVORITES_KEY

logger = logging.getLogger("shortflix.storage")


def load_json(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        logger.warning("Could not read %s, starting empty", path)
        return {}


def save_json(path: Path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


class KeyValueStorage:
    """Durable string slots kept in a single JSON file.

    Works like a browser's localStorage: values are strings and callers do
    their own encoding.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        data = load_json(self.path)
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        save_json(self.path, data)


class FavoritesStore:
    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> Set[int]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return set()
        try:
            ids = json.loads(raw)
            if not isinstance(ids, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
                raise ValueError("expected a JSON array of integers")
        except ValueError as exc:
            logger.warning("Failed to parse favorites from %r: %s", self.key, exc)
            return set()
        return set(ids)

    def save(self, ids: Iterable[int]) -> None:
        self.storage.set_item(self.key, json.dumps(sorted(ids)))
