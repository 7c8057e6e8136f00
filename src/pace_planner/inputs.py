"""
Pace Planner - Input Parsing
フォーム入力値を計算エンジン用のデータに変換（空欄・不正値は0扱い）
"""
import numbers
import re
from typing import Optional

from .config import get_event_preset
from .errors import InvalidDistance
from .pacing import DistanceInput, DistanceUnit, GoalTime, TargetPace


# 先頭の数値部分のみを読む（"12abc" → 12、"1e3" → 1）
INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int_or_zero(raw) -> int:
    """入力値を整数に変換（空欄・数値でない場合は0）

    文字列は先頭の整数部分だけを読み、以降の文字は無視する。

    Args:
        raw: 入力値 (例: "8", 8, "7.9", "12abc", "", None)

    Returns:
        整数（小数は切り捨て）
    """
    if raw is None or isinstance(raw, bool):
        return 0

    if isinstance(raw, numbers.Real):
        try:
            return int(raw)
        except (ValueError, OverflowError):
            return 0

    match = INT_PREFIX.match(str(raw))
    return int(match.group(1)) if match else 0


def parse_distance_value(raw) -> Optional[float]:
    """距離の入力値を数値に変換（先頭の数値部分のみ読む）

    Returns:
        数値（空欄・数値でない場合はNone。検証は計算エンジン側で行う）
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, numbers.Real):
        return float(raw)

    match = FLOAT_PREFIX.match(str(raw))
    return float(match.group(1)) if match else None


def build_distance_input(raw_value, unit="mi") -> DistanceInput:
    """距離入力を作成（単位は "mi" / "km"）

    Raises:
        InvalidDistance: 未知の単位
    """
    try:
        unit = DistanceUnit(unit)
    except ValueError:
        raise InvalidDistance(f"Unknown distance unit: {unit!r}")

    return DistanceInput(value=parse_distance_value(raw_value), unit=unit)


def build_goal_time(hours=0, minutes=0, seconds=0) -> GoalTime:
    """目標タイムを作成（各フィールドは繰り上げせずそのまま保持）"""
    return GoalTime(
        hours=parse_int_or_zero(hours),
        minutes=parse_int_or_zero(minutes),
        seconds=parse_int_or_zero(seconds),
    )


def build_target_pace(minutes=0, seconds=0) -> TargetPace:
    """目標ペース（分:秒/マイル）を作成"""
    return TargetPace(
        minutes_per_mile=parse_int_or_zero(minutes),
        seconds_per_mile=parse_int_or_zero(seconds),
    )


def distance_from_preset(event_name: str) -> Optional[DistanceInput]:
    """種目プリセットから距離入力を作成

    Args:
        event_name: 種目名（"5K", "10K", "Half Marathon", "Marathon"）

    Returns:
        DistanceInput（カスタム距離の場合はNone）
    """
    preset = get_event_preset(event_name)
    if preset is None:
        return None

    value, unit = preset
    return DistanceInput(value=value, unit=DistanceUnit(unit))
