"""
Chart creation utilities for the visualization dashboard.

Figures are built from the derived tables in ``engagement_viz.aggregator``;
no statistics are computed here apart from filling the platform/post-type
grid for the grouped bar chart.
"""

from typing import Dict, List

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .constants import (
    AGE_GROUP_LABEL,
    AVG_LIKES_LABEL,
    BOX_FILL_COLOR,
    BOX_LINE_COLOR,
    BOX_PLOT_WIDTH,
    CHART_HEIGHT,
    CHART_MARGIN,
    DATE_LABEL,
    LEGEND_CONFIG,
    LIKES_LABEL,
    LINE_COLOR,
    PLATFORM_LABEL,
    POST_TYPE_COLORS,
    POST_TYPE_LABEL,
    WIDE_CHART_WIDTH,
)

BOX_PLOT_TITLE = "Likes by Age Group"
BAR_CHART_TITLE = "Average Likes by Platform and Post Type"
LINE_CHART_TITLE = "Average Likes over Time"


def empty_figure(title: str, message: str = "No data available") -> go.Figure:
    """Placeholder figure shown when a chart has nothing to plot."""
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
        xanchor="center",
        yanchor="middle",
        showarrow=False,
        font=dict(size=16, color="gray"),
    )
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        height=CHART_HEIGHT,
    )
    return fig


def complete_platform_grid(grouped: pd.DataFrame) -> pd.DataFrame:
    """Expand grouped means to every platform x post type pair.

    Pairs absent from the data get avg_likes = 0 so each platform shows a
    bar slot for every post type. Platform and post type orders follow
    their first appearance in ``grouped``.
    """
    if grouped.empty:
        return grouped.copy()

    platforms = list(pd.unique(grouped["platform"]))
    post_types = list(pd.unique(grouped["post_type"]))
    full_index = pd.MultiIndex.from_product(
        [platforms, post_types], names=["platform", "post_type"]
    )
    return (
        grouped.set_index(["platform", "post_type"])["avg_likes"]
        .reindex(full_index, fill_value=0.0)
        .reset_index()
    )


def create_box_plot(summaries: Dict[str, Dict[str, float]]) -> go.Figure:
    """Box plot of likes per age group from precomputed five-number summaries."""
    if not summaries:
        return empty_figure(BOX_PLOT_TITLE)

    fig = go.Figure()
    for age_group, stats in summaries.items():
        fig.add_trace(
            go.Box(
                name=age_group,
                x=[age_group],
                q1=[stats["q1"]],
                median=[stats["median"]],
                q3=[stats["q3"]],
                lowerfence=[stats["lower_whisker"]],
                upperfence=[stats["upper_whisker"]],
                fillcolor=BOX_FILL_COLOR,
                line=dict(color=BOX_LINE_COLOR, width=2),
                width=0.5,
                showlegend=False,
            )
        )

    fig.update_layout(
        title=BOX_PLOT_TITLE,
        xaxis=dict(
            title=AGE_GROUP_LABEL,
            type="category",
            categoryorder="array",
            categoryarray=list(summaries.keys()),
        ),
        yaxis=dict(title=LIKES_LABEL, rangemode="tozero"),
        height=CHART_HEIGHT,
        width=BOX_PLOT_WIDTH,
        margin=CHART_MARGIN,
    )
    return fig


def create_grouped_bar_chart(grouped: pd.DataFrame) -> go.Figure:
    """Grouped bar chart of mean likes: one group per platform, one bar per post type."""
    if grouped.empty:
        return empty_figure(BAR_CHART_TITLE)

    grid = complete_platform_grid(grouped)
    fig = px.bar(
        grid,
        x="platform",
        y="avg_likes",
        color="post_type",
        barmode="group",
        title=BAR_CHART_TITLE,
        labels={
            "platform": PLATFORM_LABEL,
            "avg_likes": AVG_LIKES_LABEL,
            "post_type": POST_TYPE_LABEL,
        },
        category_orders={
            "platform": list(pd.unique(grid["platform"])),
            "post_type": list(pd.unique(grid["post_type"])),
        },
        color_discrete_sequence=POST_TYPE_COLORS,
        height=CHART_HEIGHT,
        width=WIDE_CHART_WIDTH,
    )

    fig.update_layout(
        legend=LEGEND_CONFIG,
        # Keep the legend clear of the title
        margin=dict(CHART_MARGIN, t=120),
        title=dict(y=0.995),
    )
    return fig


def create_line_chart(daily: pd.DataFrame) -> go.Figure:
    """Smoothed line chart of mean likes per date, in the given (chronological) order."""
    if daily.empty:
        return empty_figure(LINE_CHART_TITLE)

    fig = px.line(
        daily,
        x="date",
        y="avg_likes",
        title=LINE_CHART_TITLE,
        labels={"date": DATE_LABEL, "avg_likes": AVG_LIKES_LABEL},
        line_shape="spline",
        height=CHART_HEIGHT,
        width=WIDE_CHART_WIDTH,
    )
    fig.update_traces(line=dict(color=LINE_COLOR, width=2))

    dates: List[str] = [str(d) for d in daily["date"]]
    fig.update_layout(
        xaxis=dict(
            type="category",
            categoryorder="array",
            categoryarray=dates,
            tickangle=-45,
        ),
        yaxis=dict(rangemode="tozero"),
        margin=CHART_MARGIN,
    )
    return fig
