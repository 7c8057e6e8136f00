"""
Pace Planner - Streamlit App Tests
"""
import pytest
import os

from streamlit.testing.v1 import AppTest

APP_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "app.py")


class TestPaceCalculatorApp:
    """app.py の画面操作テスト"""

    @pytest.fixture
    def app(self):
        """初回表示済みのアプリ"""
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        at.run()
        return at

    def test_initial_state(self, app):
        """初期表示では結果なし・エラーなし"""
        assert not app.exception
        assert app.session_state["pace_result"] is None
        assert len(app.error) == 0
        assert app.text_input(key="distance").value == ""
        assert app.selectbox(key="unit").value == "mi"

    def test_calculate_pace_from_time(self, app):
        """3マイル・24:00 → 平均8:00/mi"""
        app.text_input(key="distance").set_value("3")
        app.text_input(key="goal_min").set_value("24")
        app.button(key="calculate").click().run()

        result = app.session_state["pace_result"]
        assert result.main_label == "Average Pace Required"
        assert result.main_metric == "8:00"
        assert [row.label for row in result.splits] == ["1", "2", "3"]

    def test_calculate_time_from_pace(self, app):
        """3マイル・8:00/mi → 合計24:00"""
        app.radio(key="mode").set_value("I Know My Pace").run()
        app.text_input(key="distance").set_value("3")
        app.button(key="calculate").click().run()

        result = app.session_state["pace_result"]
        assert result.main_label == "Total Estimated Time"
        assert result.main_metric == "24:00"

    def test_mode_inputs_are_independent(self, app):
        """目標タイムの秒を入力してもペース入力には引き継がれない"""
        app.text_input(key="distance").set_value("3")
        app.text_input(key="goal_sec").set_value("30").run()

        app.radio(key="mode").set_value("I Know My Pace").run()

        assert app.text_input(key="pace_min").value == "8"
        assert app.text_input(key="pace_sec").value == "0"

        app.button(key="calculate").click().run()
        assert app.session_state["pace_result"].sub_label == "at 8:00/mi avg"

    def test_failed_calculation_keeps_previous_result(self, app):
        """不正な距離で再計算しても直前の結果は残る"""
        app.text_input(key="distance").set_value("3")
        app.text_input(key="goal_min").set_value("24")
        app.button(key="calculate").click().run()
        previous = app.session_state["pace_result"]

        app.text_input(key="distance").set_value("")
        app.button(key="calculate").click().run()

        assert [e.value for e in app.error] == ["Please enter a valid distance"]
        assert app.session_state["pace_result"] == previous
        assert any("8:00" in m.value for m in app.markdown)

    def test_zero_goal_time_error(self, app):
        """目標タイム0はエラー表示のみで結果を作らない"""
        app.text_input(key="distance").set_value("3")
        app.text_input(key="goal_min").set_value("0")
        app.button(key="calculate").click().run()

        assert [e.value for e in app.error] == ["Please enter a goal time"]
        assert app.session_state["pace_result"] is None

    def test_preset_fills_editable_fields(self, app):
        """種目プリセットは距離・単位を入力するだけで編集可能のまま"""
        app.selectbox(key="event").set_value("Half Marathon").run()

        distance = app.text_input(key="distance")
        unit = app.selectbox(key="unit")
        assert distance.value == "21.0975"
        assert unit.value == "km"
        assert not distance.disabled
        assert not unit.disabled

        app.text_input(key="distance").set_value("13.1")
        app.selectbox(key="unit").set_value("mi")
        app.text_input(key="goal_hr").set_value("2")
        app.button(key="calculate").click().run()

        result = app.session_state["pace_result"]
        assert result.splits[-1].label == "14 (0.10)"

    def test_custom_event_clears_distance(self, app):
        """カスタム距離に戻すと距離は空欄・単位はマイル"""
        app.selectbox(key="event").set_value("10K").run()
        app.selectbox(key="event").set_value("Custom Distance").run()

        assert app.text_input(key="distance").value == ""
        assert app.selectbox(key="unit").value == "mi"
