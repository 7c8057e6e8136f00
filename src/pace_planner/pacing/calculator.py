"""
Pace Planner - Pace Calculator
距離の正規化、ペース・タイムの相互算出、計算結果の組み立て
"""
import logging
import math
import numbers
from typing import Union

from ..config import (
    KM_TO_MILES,
    LABEL_AVERAGE_PACE,
    LABEL_TOTAL_TIME,
    SUB_LABEL_PER_MILE,
)
from ..errors import (
    InvalidDistance,
    InvalidGoalTime,
    InvalidTargetPace,
    PaceCalculationError,
)
from .formatter import format_time
from .models import (
    CalculationMode,
    DistanceInput,
    DistanceUnit,
    GoalTime,
    PaceResult,
    RateResolution,
    TargetPace,
)
from .splits import generate_splits

logger = logging.getLogger(__name__)


def normalize_distance(value, unit: Union[DistanceUnit, str] = DistanceUnit.MILES) -> float:
    """距離をマイルに変換

    Args:
        value: 距離（正の有限数）
        unit: 単位（DistanceUnit または "mi" / "km"）

    Returns:
        マイル換算の距離

    Raises:
        InvalidDistance: 数値でない・有限でない・0以下・未知の単位
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDistance()
    if not math.isfinite(value) or value <= 0:
        raise InvalidDistance()

    try:
        unit = DistanceUnit(unit)
    except ValueError:
        raise InvalidDistance(f"Unknown distance unit: {unit!r}")

    if unit is DistanceUnit.KILOMETERS:
        return value * KM_TO_MILES
    return float(value)


def resolve_rate(mode: CalculationMode, total_miles: float,
                 time_or_pace: Union[GoalTime, TargetPace]) -> RateResolution:
    """モードに応じて平均ペースまたは合計タイムを算出

    - DERIVE_FROM_TIME: 合計タイム ÷ 距離 = 平均ペース
    - DERIVE_FROM_PACE: 平均ペース × 距離 = 合計タイム

    目標タイムの分・秒は59を超えても繰り上げず、そのまま合算する。

    Raises:
        InvalidGoalTime: 目標タイムの合計が0
        InvalidTargetPace: 目標ペースが0:00
    """
    mode = CalculationMode(mode)

    if mode is CalculationMode.DERIVE_FROM_TIME:
        if not isinstance(time_or_pace, GoalTime) or time_or_pace.total_seconds <= 0:
            raise InvalidGoalTime()
        total_duration = time_or_pace.total_seconds
        return RateResolution(
            avg_seconds_per_mile=total_duration / total_miles,
            total_duration_seconds=total_duration,
        )

    if not isinstance(time_or_pace, TargetPace) or time_or_pace.total_seconds <= 0:
        raise InvalidTargetPace()
    avg_pace = time_or_pace.total_seconds
    return RateResolution(
        avg_seconds_per_mile=avg_pace,
        total_duration_seconds=avg_pace * total_miles,
    )


def calculate(mode: CalculationMode, distance: DistanceInput,
              time_or_pace: Union[GoalTime, TargetPace]) -> PaceResult:
    """ペース計算のエントリーポイント

    Args:
        mode: 計算モード
        distance: 距離入力
        time_or_pace: 目標タイム（DERIVE_FROM_TIME）または目標ペース（DERIVE_FROM_PACE）

    Returns:
        PaceResult（毎回新しいインスタンス）

    Raises:
        PaceCalculationError のサブクラス（入力が不正な場合、結果は返さない）
    """
    mode = CalculationMode(mode)
    if distance is None:
        raise InvalidDistance()

    try:
        total_miles = normalize_distance(distance.value, distance.unit)
        rate = resolve_rate(mode, total_miles, time_or_pace)
    except PaceCalculationError as e:
        logger.info("Calculation rejected (%s): %s", type(e).__name__, e.message)
        raise

    splits = generate_splits(total_miles, rate.avg_seconds_per_mile)

    logger.debug(
        "mode=%s miles=%.4f avg=%.2f s/mi total=%.2f s splits=%d",
        mode.name, total_miles, rate.avg_seconds_per_mile,
        rate.total_duration_seconds, len(splits),
    )

    if mode is CalculationMode.DERIVE_FROM_TIME:
        return PaceResult(
            main_metric_seconds=rate.avg_seconds_per_mile,
            main_label=LABEL_AVERAGE_PACE,
            sub_label=SUB_LABEL_PER_MILE,
            splits=splits,
        )

    return PaceResult(
        main_metric_seconds=rate.total_duration_seconds,
        main_label=LABEL_TOTAL_TIME,
        sub_label=f"at {format_time(rate.avg_seconds_per_mile)}/mi avg",
        splits=splits,
    )
