"""
Pace Planner - UI Components
再利用可能なUIコンポーネント
"""
import streamlit as st

from ..config import APP_NAME, APP_VERSION, EXPORT_FILE_NAME, STRATEGY_CAPTION, STRATEGY_NAME
from ..export import format_results_text, splits_to_dataframe
from ..pacing import PaceResult

CSS = """
<style>
    .main-header { font-size: 2.2rem; color: #1E88E5; text-align: center; margin-bottom: 0.2rem; }
    .version-tag { font-size: 0.9rem; color: #888; text-align: center; margin-bottom: 1.5rem; }
    .result-summary {
        background: linear-gradient(135deg, #1E88E5 0%, #1565C0 100%);
        color: white;
        padding: 1.2rem;
        border-radius: 12px;
        text-align: center;
        margin: 1rem 0;
    }
    .result-summary .sub-label { display: block; font-size: 0.9rem; opacity: 0.9; }
    .result-summary .main-pace { display: block; font-size: 2.4rem; font-weight: bold; }
    .strategy-caption { text-align: center; font-size: 0.85rem; color: #666; margin-bottom: 15px; }
</style>
"""


def load_css() -> None:
    """インラインCSSを適用"""
    st.markdown(CSS, unsafe_allow_html=True)


def render_header() -> None:
    """アプリヘッダーを表示"""
    st.markdown(f'<h1 class="main-header">🏃 {APP_NAME}</h1>', unsafe_allow_html=True)
    st.markdown(f'<p class="version-tag">Version {APP_VERSION}</p>', unsafe_allow_html=True)


def render_result_summary(result: PaceResult) -> None:
    """メイン指標（平均ペース or 合計タイム）を表示"""
    st.markdown(f"""
<div class="result-summary">
    <span class="sub-label">{result.main_label}</span>
    <span class="main-pace">{result.main_metric}</span>
    <span class="sub-label">{result.sub_label}</span>
</div>
    """, unsafe_allow_html=True)


def render_splits_table(result: PaceResult) -> None:
    """ネガティブスプリット表を表示"""
    st.markdown(f"### {STRATEGY_NAME} Strategy")
    st.markdown(f'<p class="strategy-caption">{STRATEGY_CAPTION}</p>', unsafe_allow_html=True)
    st.dataframe(splits_to_dataframe(result), hide_index=True, width="stretch")


def render_export(result: PaceResult) -> None:
    """テキスト出力（コピー・ダウンロード）を表示

    コピーはst.codeのコピーボタン（ブラウザ側）で行うため、サーバー側で失敗する処理はない
    """
    text = format_results_text(result)

    with st.expander("📋 Copy Splits", expanded=False):
        st.code(text, language=None)
        st.download_button(
            label="Download .txt",
            data=text,
            file_name=EXPORT_FILE_NAME,
            mime="text/plain",
        )


def render_footer() -> None:
    """フッターを表示"""
    st.markdown("---")
    st.markdown(
        f'<p style="text-align: center; color: #888; font-size: 0.85rem;">'
        f'{APP_NAME} v{APP_VERSION}</p>',
        unsafe_allow_html=True
    )
