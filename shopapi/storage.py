# shopapi/storage.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger("shopapi.storage")

# One JSON array per collection, rewritten as a whole on every save.
# There is no locking: two requests that load, mutate and save the same
# file concurrently can lose one of the updates.


class JsonCollection:
    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        # Missing file -> empty collection. Unreadable, corrupt or non-array
        # content also reads as empty, but is logged so it doesn't go unnoticed.
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, treating it as empty: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array, treating it as empty", self.path)
            return []
        return data

    def save(self, records: List[Dict[str, Any]]) -> None:
        # Write errors are not caught here.
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
