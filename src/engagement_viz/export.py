"""
Export of derived tables and charts.

CSV exports use the column spelling of the source dataset (Platform,
PostType, AvgLikes, Date) so they can be fed to other tools unchanged.
"""

from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from .config import (
    BAR_PLOT_FILENAME,
    BOX_PLOT_FILENAME,
    DAILY_MEAN_FILENAME,
    GROUPED_MEAN_FILENAME,
    LINE_PLOT_FILENAME,
)

EXPORT_COLUMN_NAMES = {
    "platform": "Platform",
    "post_type": "PostType",
    "age_group": "AgeGroup",
    "date": "Date",
    "avg_likes": "AvgLikes",
}


def to_export_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Rename derived-table columns to the dataset's header spelling."""
    return df.rename(columns=EXPORT_COLUMN_NAMES)


def export_csv(df: pd.DataFrame) -> str:
    """Serialize a derived table, averages written with two decimals."""
    return to_export_frame(df).to_csv(index=False, float_format="%.2f")


def write_tables(
    output_dir: Union[str, Path], grouped: pd.DataFrame, daily: pd.DataFrame
) -> Dict[str, Path]:
    """Write the grouped and daily means as CSV files; returns the written paths."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written = {
        "grouped": out / GROUPED_MEAN_FILENAME,
        "daily": out / DAILY_MEAN_FILENAME,
    }
    written["grouped"].write_text(export_csv(grouped), encoding="utf-8")
    written["daily"].write_text(export_csv(daily), encoding="utf-8")
    return written


def write_charts(
    output_dir: Union[str, Path],
    box: go.Figure,
    bar: go.Figure,
    line: go.Figure,
    include_plotlyjs: Optional[Union[bool, str]] = "cdn",
) -> Dict[str, Path]:
    """Write the three figures as standalone HTML files."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written = {
        "box": out / BOX_PLOT_FILENAME,
        "bar": out / BAR_PLOT_FILENAME,
        "line": out / LINE_PLOT_FILENAME,
    }
    for key, fig in (("box", box), ("bar", bar), ("line", line)):
        fig.write_html(str(written[key]), include_plotlyjs=include_plotlyjs)
    return written
