"""
Pace Planner - UI Package
Streamlit表示コンポーネント
"""
