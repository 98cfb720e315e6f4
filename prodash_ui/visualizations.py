from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from prodash_ui.constants import CHART_COLORS, CURRENCY_SYMBOL, PALETTE


def format_money(value) -> str:
    try:
        return f"{CURRENCY_SYMBOL}{float(value or 0):,.2f}"
    except (TypeError, ValueError):
        return f"{CURRENCY_SYMBOL}0.00"


def apply_common_plot_style(fig, title, show_xgrid=True, show_ygrid=True):
    fig.update_layout(
        title=title,
        title_font=dict(color=PALETTE["text_main"], size=16),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=PALETTE["text_main"]),
        margin=dict(l=40, r=20, t=40, b=30),
        xaxis=dict(
            showgrid=show_xgrid,
            gridcolor=PALETTE["plot_grid"],
            tickfont=dict(color=PALETTE["text_soft"]),
            zeroline=False,
            showline=True,
            linecolor=PALETTE["border"],
            mirror=True,
        ),
        yaxis=dict(
            showgrid=show_ygrid,
            gridcolor=PALETTE["plot_grid"],
            zeroline=False,
            tickfont=dict(color=PALETTE["text_soft"]),
            showline=True,
            linecolor=PALETTE["border"],
            mirror=True,
        ),
    )
    return fig


def category_frame(categories) -> pd.DataFrame:
    frame = pd.DataFrame(list(categories or []), columns=["category", "amount"])
    frame["amount"] = pd.to_numeric(frame["amount"], errors="coerce").fillna(0.0)
    return frame


def category_chart(categories, title="Spending by category", height=320):
    frame = category_frame(categories)
    colors = [CHART_COLORS[idx % len(CHART_COLORS)] for idx in range(len(frame))]
    fig = go.Figure(
        data=go.Pie(
            labels=frame["category"].tolist(),
            values=frame["amount"].tolist(),
            hole=0.55,
            marker=dict(colors=colors),
            sort=False,
        )
    )
    apply_common_plot_style(fig, title, show_xgrid=False, show_ygrid=False)
    fig.update_layout(height=height, showlegend=True)
    return fig


def progress_percent(value, total) -> int:
    if not total:
        return 0
    return int(round((value / total) * 100))
