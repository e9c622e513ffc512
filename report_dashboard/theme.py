"""
Theme constants — colors, chart layout, tree-table styling.
Import from here instead of hardcoding colors anywhere.
"""

# ── Color Palette ────────────────────────────────────────────────────────────
BG = "#0a0a14"
CARD = "#141828"
CARD2 = "#1a1a2e"
GREEN = "#2ecc71"
RED = "#e74c3c"
BLUE = "#3498db"
ORANGE = "#f39c12"
PURPLE = "#9b59b6"
TEAL = "#1abc9c"
WHITE = "#ffffff"
GRAY = "#aaaaaa"
DARKGRAY = "#666666"
CYAN = "#00d4ff"

# ── Widget accents ───────────────────────────────────────────────────────────
WIDGET_COLORS = {
    "cash_bank": GREEN,
    "debt": RED,
    "plan_fact": BLUE,
    "inventory": PURPLE,
    "cash_dynamics_chart": CYAN,
}

# ── Tree table rows ──────────────────────────────────────────────────────────
TOTAL_ROW_BG = "#ffffff14"
GROUP_ROW_BG = "#3498db22"
INDENT_PX = 24

# ── Plotly Chart Layout ──────────────────────────────────────────────────────
CHART_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font={"color": WHITE},
    margin=dict(t=50, b=30, l=60, r=20),
)

# ── Sidebar Dimensions ───────────────────────────────────────────────────────
SIDEBAR_WIDTH = "250px"
CONTENT_MARGIN = "266px"  # sidebar + gap

# Toast placement shared by every callback that reports a save
TOAST_STYLE = {"position": "fixed", "top": 20, "right": 20, "zIndex": 9999}
