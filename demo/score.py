"""Score sample: a small architecture exercising every participant role.

ScoreStorage (utility) persists the score in memory, ScoreModel holds it
as an ObservableValue, ScoreSystem tracks the best score seen, AddScore /
ResetScore mutate it and IsScoreAbove reads it.
"""

from __future__ import annotations

from pydantic import BaseModel

from architecture import (
    AbstractCommand,
    AbstractModel,
    AbstractQuery,
    AbstractSystem,
    Architecture,
    Utility,
)
from core.observable import ObservableValue


class ScoreChanged(BaseModel):
    """Sent after a command changes the score."""

    score: int = 0
    delta: int = 0


class BestScoreBeaten(BaseModel):
    best: int = 0


class ScoreStorage(Utility):
    """In-memory key/value store standing in for editor prefs."""

    def __init__(self) -> None:
        self._values: dict[str, int] = {}

    def load_int(self, key: str, default: int = 0) -> int:
        return self._values.get(key, default)

    def save_int(self, key: str, value: int) -> None:
        self._values[key] = value


class ScoreModel(AbstractModel):
    STORAGE_KEY = "score"

    def __init__(self) -> None:
        self.score: ObservableValue[int] = ObservableValue(0)

    def on_init(self) -> None:
        storage = self.get_utility(ScoreStorage)
        if storage is None:
            return
        self.score.value = storage.load_int(self.STORAGE_KEY)
        self.score.subscribe(lambda value: storage.save_int(self.STORAGE_KEY, value))


class ScoreSystem(AbstractSystem):
    """Keeps the best score and announces when it is beaten."""

    def __init__(self) -> None:
        self.best = 0
        self.history: list[int] = []

    def on_init(self) -> None:
        model = self.get_model(ScoreModel)
        self.best = model.score.value
        self.register_event(ScoreChanged, self._on_score_changed)

    def _on_score_changed(self, e: ScoreChanged) -> None:
        self.history.append(e.score)
        if e.score > self.best:
            self.best = e.score
            self.send_event(BestScoreBeaten(best=e.score))


class AddScore(AbstractCommand):
    def __init__(self, amount: int = 1):
        self.amount = amount

    def on_execute(self) -> None:
        model = self.get_model(ScoreModel)
        model.score.value += self.amount
        self.send_event(ScoreChanged(score=model.score.value, delta=self.amount))


class ResetScore(AbstractCommand):
    def on_execute(self) -> None:
        model = self.get_model(ScoreModel)
        previous = model.score.value
        model.score.value = 0
        self.send_event(ScoreChanged(score=0, delta=-previous))


class IsScoreAbove(AbstractQuery[bool]):
    def __init__(self, threshold: int):
        self.threshold = threshold

    def on_do(self) -> bool:
        return self.get_model(ScoreModel).score.value > self.threshold


class ScoreArchitecture(Architecture):
    def init(self) -> None:
        self.register_utility(ScoreStorage())
        self.register_model(ScoreModel())
        self.register_system(ScoreSystem())
