"""
Pace Planner
ネガティブスプリットのペース計算
"""
