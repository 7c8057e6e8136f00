"""
Pace Planner - Time Formatter
秒数を時計表記の文字列に変換
"""
import math


def round_half_up(value: float) -> int:
    """四捨五入（Pythonのround()は偶数丸めのため使わない）"""
    return int(math.floor(value + 0.5))


def format_time(total_seconds: float) -> str:
    """秒を時間文字列に変換

    秒は四捨五入し、60秒になった場合は分へ、60分になった場合は時間へ繰り上げる。
    負の値・無限大は想定しない（呼び出し側の責任）。

    Args:
        total_seconds: 秒数

    Returns:
        時間文字列 (例: "1:01:01" or "8:03")
    """
    hours = int(total_seconds // 3600)
    minutes = int((total_seconds % 3600) // 60)
    secs = round_half_up(total_seconds % 60)

    if secs == 60:
        secs = 0
        minutes += 1
    if minutes == 60:
        minutes = 0
        hours += 1

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
