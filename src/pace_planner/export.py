"""
Pace Planner - Result Export
計算結果をテキスト・表形式に変換
"""
import pandas as pd

from .config import (
    EXPORT_HEADER,
    EXPORT_LABEL_WIDTH,
    EXPORT_PACE_WIDTH,
    EXPORT_RULE,
    EXPORT_TITLE,
    STRATEGY_NAME,
)
from .pacing import PaceResult

SPLIT_COLUMNS = ["Mile", "Split Pace", "Elapsed Time"]


def format_results_text(result: PaceResult) -> str:
    """コピー・ダウンロード用のプレーンテキストを作成

    Args:
        result: 計算結果

    Returns:
        テキスト（各行末に改行）
    """
    lines = [
        EXPORT_TITLE,
        f"{result.main_label}: {result.main_metric}",
        f"Strategy: {STRATEGY_NAME}",
        "",
        EXPORT_HEADER,
        EXPORT_RULE,
    ]

    for row in result.splits:
        lines.append(
            f"{row.label.ljust(EXPORT_LABEL_WIDTH)} | "
            f"{row.pace.ljust(EXPORT_PACE_WIDTH)} | {row.elapsed}"
        )

    return "\n".join(lines) + "\n"


def splits_to_dataframe(result: PaceResult) -> pd.DataFrame:
    """スプリット表をDataFrameに変換（表示用に時間は文字列化）"""
    rows = [(row.label, row.pace, row.elapsed) for row in result.splits]
    return pd.DataFrame(rows, columns=SPLIT_COLUMNS)
