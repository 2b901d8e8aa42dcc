import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

DATA_FILE = Path(__file__).parent / "test_data.json"


@lru_cache(maxsize=1)
def _load() -> Dict[str, Any]:
    with open(DATA_FILE) as f:
        return json.load(f)


class TestDataLoader:
    """Read-only access to test_data.json; callers get deep copies."""

    __test__ = False

    def get(self, key: str) -> Any:
        return copy.deepcopy(_load().get(key))

    def users(self) -> List[Dict[str, Any]]:
        return self.get("users")

    def credentials(self, email: str) -> Dict[str, str]:
        for user in self.users():
            if user["email"] == email:
                return {"email": user["email"], "password": user["password"]}
        raise KeyError(email)
