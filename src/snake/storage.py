# storage.py
import json
from pathlib import Path
from typing import Dict, Union

from .config import BEST_SCORE_KEY, BEST_SCORE_FILE


class BestScoreStore:
    """
    Tiny key-value file holding the best score.

    The file is a JSON object, the score is kept as a decimal string under
    `key`. Anything missing or corrupt reads back as 0 and failed writes are
    dropped: losing a high score must never stop the game.
    """

    def __init__(self, path: Union[str, Path] = BEST_SCORE_FILE,
                 key: str = BEST_SCORE_KEY, debug: bool = False):
        self.path = Path(path)
        self.key = key
        self.debug = debug

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            self._warn(f"could not read {self.path}: {exc}")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> int:
        raw = self._read_all().get(self.key)
        if raw is None:
            return 0
        try:
            score = int(str(raw).strip())
        except ValueError:
            self._warn(f"ignoring non-numeric best score {raw!r}")
            return 0
        return max(score, 0)

    def save(self, score: int) -> None:
        data = self._read_all()
        data[self.key] = str(int(score))
        try:
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            self._warn(f"could not write {self.path}: {exc}")

    def _warn(self, msg: str) -> None:
        if self.debug:
            print(f"[STORE] {msg}")
