"""Sample architecture used by the CLI and the test suite."""

from demo.score import (
    AddScore,
    BestScoreBeaten,
    IsScoreAbove,
    ResetScore,
    ScoreArchitecture,
    ScoreChanged,
    ScoreModel,
    ScoreStorage,
    ScoreSystem,
)

__all__ = [
    "AddScore",
    "BestScoreBeaten",
    "IsScoreAbove",
    "ResetScore",
    "ScoreArchitecture",
    "ScoreChanged",
    "ScoreModel",
    "ScoreStorage",
    "ScoreSystem",
]
