"""
Pace Planner - Data Models
計算エンジンの入出力データ（すべてイミュータブル）
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .formatter import format_time


class DistanceUnit(str, Enum):
    """距離の単位"""

    MILES = "mi"
    KILOMETERS = "km"


class CalculationMode(str, Enum):
    """計算モード

    DERIVE_FROM_TIME: 目標タイム → 平均ペースを算出
    DERIVE_FROM_PACE: 目標ペース → 合計タイムを算出
    """

    DERIVE_FROM_TIME = "calculatePace"
    DERIVE_FROM_PACE = "calculateTime"


@dataclass(frozen=True)
class DistanceInput:
    value: float
    unit: DistanceUnit = DistanceUnit.MILES


@dataclass(frozen=True)
class GoalTime:
    """目標タイム（各値は繰り上げせず単純に合算する）"""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class TargetPace:
    """目標ペース（1マイルあたり）"""

    minutes_per_mile: int = 0
    seconds_per_mile: int = 0

    @property
    def total_seconds(self) -> int:
        return self.minutes_per_mile * 60 + self.seconds_per_mile


@dataclass(frozen=True)
class RateResolution:
    avg_seconds_per_mile: float
    total_duration_seconds: float


@dataclass(frozen=True)
class SplitRow:
    """スプリット表の1行

    label: マイル番号（端数区間は "4 (0.20)" 形式）
    pace_seconds: その区間の1マイルあたりペース（秒）
    elapsed_seconds: スタートからの累計タイム（秒）
    """

    label: str
    pace_seconds: float
    elapsed_seconds: float

    @property
    def pace(self) -> str:
        return format_time(self.pace_seconds)

    @property
    def elapsed(self) -> str:
        return format_time(self.elapsed_seconds)


@dataclass(frozen=True)
class PaceResult:
    """1回の計算結果"""

    main_metric_seconds: float
    main_label: str
    sub_label: str
    splits: Tuple[SplitRow, ...]

    @property
    def main_metric(self) -> str:
        return format_time(self.main_metric_seconds)
