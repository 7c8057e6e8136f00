"""
Pace Planner - Errors
入力検証エラーの定義
"""


class PaceCalculationError(ValueError):
    """ペース計算の入力検証エラー（基底クラス）

    messageはそのまま利用者に表示できる文言
    """

    default_message = "Invalid input"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidDistance(PaceCalculationError):
    """距離が未入力・数値でない・0以下"""

    default_message = "Please enter a valid distance"


class InvalidGoalTime(PaceCalculationError):
    """目標タイムの合計が0秒"""

    default_message = "Please enter a goal time"


class InvalidTargetPace(PaceCalculationError):
    """目標ペースの分・秒がどちらも0"""

    default_message = "Please enter a target pace"
