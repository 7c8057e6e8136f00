"""
Pace Planner - Configuration
アプリケーション全体の設定値を管理
"""
import logging
import os

# =============================================
# アプリ情報
# =============================================
APP_NAME = "Pace Calculator"
APP_VERSION = "1.0.0"

# =============================================
# 計算エンジン設定
# =============================================
# 1km = 0.621371マイル
KM_TO_MILES = 0.621371

# ネガティブスプリットの1マイルごとのペース短縮幅（秒）
CUTDOWN_SECONDS = 5

# 端数距離がこれ以下なら端数行を出さない（浮動小数点誤差対策）
PARTIAL_MILE_THRESHOLD = 0.01

# =============================================
# 結果ラベル
# =============================================
LABEL_AVERAGE_PACE = "Average Pace Required"
LABEL_TOTAL_TIME = "Total Estimated Time"
SUB_LABEL_PER_MILE = "per mile"
STRATEGY_NAME = "Negative Split"
STRATEGY_CAPTION = "Strategy: Start ~2.5s slower, finish ~2.5s faster than avg"

# =============================================
# 種目プリセット
# =============================================
CUSTOM_EVENT = "Custom Distance"

# 種目名: (距離, 単位)
EVENT_PRESETS = {
    "5K": (5.0, "km"),
    "10K": (10.0, "km"),
    "Half Marathon": (21.0975, "km"),
    "Marathon": (42.195, "km"),
}


def get_event_preset(event_name: str):
    """種目名からプリセット距離を返す

    Args:
        event_name: 種目名（"5K", "Marathon"等）

    Returns:
        (距離, 単位) のタプル。カスタム・未知の種目はNone
    """
    return EVENT_PRESETS.get(event_name)


# =============================================
# テキスト出力設定
# =============================================
EXPORT_TITLE = "Pace Calculator Results"
EXPORT_HEADER = "Mile | Pace  | Elapsed"
EXPORT_RULE = "-" * 22
EXPORT_LABEL_WIDTH = 4
EXPORT_PACE_WIDTH = 5
EXPORT_FILE_NAME = "pace_splits.txt"

# =============================================
# ログ設定
# =============================================
LOG_LEVEL_ENV = "PACE_PLANNER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """環境変数からログレベルを返す（不正値はINFO）"""
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """ルートロガーを設定（複数回呼ばれても一度だけ設定される）"""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
