"""
Pace Calculator - Streamlit App
目標タイムまたは目標ペースからネガティブスプリットのペース表を作成
"""
import os
import sys

import streamlit as st

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from pace_planner.config import (
    APP_NAME,
    APP_VERSION,
    CUSTOM_EVENT,
    EVENT_PRESETS,
    configure_logging,
)
from pace_planner.errors import PaceCalculationError
from pace_planner.inputs import (
    build_distance_input,
    build_goal_time,
    build_target_pace,
    distance_from_preset,
)
from pace_planner.pacing import CalculationMode, calculate
from pace_planner.ui.components import (
    load_css,
    render_export,
    render_footer,
    render_header,
    render_result_summary,
    render_splits_table,
)

configure_logging()

MODE_LABELS = {
    "I Know My Time": CalculationMode.DERIVE_FROM_TIME,
    "I Know My Pace": CalculationMode.DERIVE_FROM_PACE,
}

# =============================================
# ページ設定
# =============================================
st.set_page_config(
    page_title=f"{APP_NAME} v{APP_VERSION}",
    page_icon="🏃",
    layout="centered",
)


def init_session_state() -> None:
    """セッション状態を初期化"""
    if "pace_result" not in st.session_state:
        st.session_state.pace_result = None
    if "distance" not in st.session_state:
        st.session_state.distance = ""
    if "unit" not in st.session_state:
        st.session_state.unit = "mi"


def apply_event_preset() -> None:
    """種目変更時に距離・単位を書き換える（入力欄は編集可能のまま）"""
    preset = distance_from_preset(st.session_state.event)
    if preset is None:
        st.session_state.distance = ""
        st.session_state.unit = "mi"
    else:
        st.session_state.distance = f"{preset.value:g}"
        st.session_state.unit = preset.unit.value


def render_distance_inputs():
    """種目・距離入力を表示し、DistanceInputを返す"""
    st.markdown("**Event / Distance**")
    st.selectbox("Event", [CUSTOM_EVENT] + list(EVENT_PRESETS.keys()),
                 key="event", on_change=apply_event_preset,
                 label_visibility="collapsed")

    col1, col2 = st.columns([3, 1])
    with col1:
        raw_distance = st.text_input("Distance", placeholder="Distance", key="distance")
    with col2:
        unit = st.selectbox("Unit", ["mi", "km"], key="unit")

    return build_distance_input(raw_distance, unit)


def render_time_inputs(mode: CalculationMode):
    """モードに応じて目標タイム or 目標ペースの入力を表示

    モードごとに別のキーを使い、入力値を共有しない
    """
    if mode is CalculationMode.DERIVE_FROM_TIME:
        st.markdown("**Goal Time (Hr : Min : Sec)**")
        col1, col2, col3 = st.columns(3)
        with col1:
            hours = st.text_input("Hr", value="", placeholder="00", key="goal_hr")
        with col2:
            minutes = st.text_input("Min", value="0", placeholder="00", key="goal_min")
        with col3:
            seconds = st.text_input("Sec", value="0", placeholder="00", key="goal_sec")
        return build_goal_time(hours, minutes, seconds)

    st.markdown("**Desired Average Pace (min/mi)**")
    col1, col2 = st.columns(2)
    with col1:
        pace_minutes = st.text_input("Min", value="8", placeholder="8", key="pace_min")
    with col2:
        pace_seconds = st.text_input("Sec", value="0", placeholder="00", key="pace_sec")
    return build_target_pace(pace_minutes, pace_seconds)


def main():
    init_session_state()
    load_css()
    render_header()

    mode_label = st.radio("Mode", list(MODE_LABELS.keys()), horizontal=True,
                          key="mode", label_visibility="collapsed")
    mode = MODE_LABELS[mode_label]

    distance = render_distance_inputs()
    time_or_pace = render_time_inputs(mode)

    button_label = "Calculate Pace" if mode is CalculationMode.DERIVE_FROM_TIME else "Calculate Time"
    if st.button(button_label, type="primary", width="stretch", key="calculate"):
        try:
            st.session_state.pace_result = calculate(mode, distance, time_or_pace)
        except PaceCalculationError as e:
            # 直前の結果は残したままエラーを表示
            st.error(e.message)

    result = st.session_state.pace_result
    if result is not None:
        render_result_summary(result)
        render_export(result)
        render_splits_table(result)

    render_footer()


if __name__ == "__main__":
    main()
