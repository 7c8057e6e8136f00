"""
Pace Planner - Negative Split Generator
平均ペースからマイルごとのネガティブスプリットを計算
"""
import logging
import math
from typing import Tuple

from ..config import CUTDOWN_SECONDS, PARTIAL_MILE_THRESHOLD
from .models import SplitRow

logger = logging.getLogger(__name__)


def generate_splits(total_miles: float, avg_seconds_per_mile: float,
                    cutdown: float = CUTDOWN_SECONDS) -> Tuple[SplitRow, ...]:
    """マイルごとのスプリットを線形ネガティブスプリットで算出

    1マイル目は平均より (距離 × cutdown / 2) 秒遅く入り、以後1マイルごとに
    cutdown 秒ずつ速くする。端数区間は直前から cutdown 秒速いペースで走る。
    ペースの下限は設けない（極端な入力では0以下になり得る）。

    Args:
        total_miles: 総距離（マイル）
        avg_seconds_per_mile: 平均ペース（秒/マイル）
        cutdown: 1マイルごとの短縮幅（秒）

    Returns:
        SplitRowのタプル（マイル順）
    """
    full_miles = math.floor(total_miles)
    partial_miles = total_miles - full_miles

    current_pace = avg_seconds_per_mile + (total_miles * cutdown) / 2
    elapsed = 0.0
    splits = []

    for mile in range(1, full_miles + 1):
        elapsed += current_pace
        splits.append(SplitRow(
            label=str(mile),
            pace_seconds=current_pace,
            elapsed_seconds=elapsed,
        ))
        current_pace -= cutdown

    if partial_miles > PARTIAL_MILE_THRESHOLD:
        # 端数区間のペースはスケールせず、経過時間のみ距離比で加算
        elapsed += current_pace * partial_miles
        splits.append(SplitRow(
            label=f"{full_miles + 1} ({partial_miles:.2f})",
            pace_seconds=current_pace,
            elapsed_seconds=elapsed,
        ))

    if splits and splits[-1].pace_seconds <= 0:
        logger.warning(
            "Split pace reached %.1f s/mi (distance=%.3f mi, avg=%.1f s/mi)",
            splits[-1].pace_seconds, total_miles, avg_seconds_per_mile,
        )

    return tuple(splits)
