"""
Pace Planner - Pacing Package
距離・ペース・タイムの計算とスプリット生成
"""
from .formatter import format_time
from .models import (
    CalculationMode,
    DistanceInput,
    DistanceUnit,
    GoalTime,
    PaceResult,
    RateResolution,
    SplitRow,
    TargetPace,
)
from .calculator import (
    normalize_distance,
    resolve_rate,
    calculate,
)
from .splits import generate_splits
