"""
Main Streamlit app for the engagement-viz dashboard.
Single-page design with:
- Dataset source (path on disk or uploaded file) and date bucket selection
- Box plot, grouped bar chart and time-series line chart in tabs
- Raw/derived data tab with CSV downloads
"""

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from engagement_viz.aggregator import (
    DATE_BUCKETS,
    average_by_date,
    average_by_platform_and_post_type,
    summarize_by_age_group,
)
from engagement_viz.config import (
    DAILY_MEAN_FILENAME,
    DEFAULT_DATA_PATH,
    GROUPED_MEAN_FILENAME,
)
from engagement_viz.errors import LoadError
from engagement_viz.export import export_csv
from engagement_viz.loader import describe_quality, load_records, parse_records

from .charts import create_box_plot, create_grouped_bar_chart, create_line_chart


def summaries_to_dataframe(summaries: Dict[str, Dict[str, float]]) -> pd.DataFrame:
    """Tabular view of the per-age-group summaries."""
    return pd.DataFrame.from_dict(summaries, orient="index").rename_axis("age_group")


def _load_selected_dataset(data_path: str, uploaded) -> Optional[pd.DataFrame]:
    try:
        if uploaded is not None:
            return parse_records(uploaded.getvalue().decode("utf-8"))
        return load_records(data_path)
    except (LoadError, UnicodeDecodeError) as e:
        st.error(f"Could not load dataset: {e}")
        return None


def _warn_on_quality(records: pd.DataFrame) -> None:
    quality = describe_quality(records)
    if quality["invalid_likes"]:
        st.warning(
            f"{quality['invalid_likes']} of {quality['rows']} rows have non-numeric likes and are excluded from the charts."
        )
    if quality["invalid_dates"]:
        st.warning(
            f"{quality['invalid_dates']} of {quality['rows']} rows have unparseable dates and are excluded from the time series."
        )
    if quality["skipped_rows"]:
        st.warning(
            f"{quality['skipped_rows']} rows with too many fields were skipped while reading the dataset."
        )


def main():
    """Main Streamlit app."""
    st.set_page_config(
        page_title="Engagement Visualizer",
        page_icon=None,
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.title("Social Media Engagement")

    source_col, bucket_col = st.columns([6, 2])
    with source_col:
        data_path = st.text_input("Dataset path", value=DEFAULT_DATA_PATH)
        uploaded = st.file_uploader("...or upload a CSV", type=["csv", "txt"])
    with bucket_col:
        bucket = st.selectbox(
            "Date bucket",
            options=list(DATE_BUCKETS),
            index=0,
            help="'day' groups by calendar day; 'timestamp' groups by the full original date text.",
        )

    with st.spinner("Loading dataset..."):
        records = _load_selected_dataset(data_path, uploaded)

    if records is None:
        st.info("Example: `engagement-viz data=data/socialMedia.csv`")
        return

    if records.empty:
        st.info("The dataset has a header but no rows.")
        return

    _warn_on_quality(records)

    summaries = summarize_by_age_group(records)
    grouped = average_by_platform_and_post_type(records)
    daily = average_by_date(records, bucket=bucket)

    box_tab, bar_tab, line_tab, raw_tab = st.tabs(
        ["Likes by Age Group", "Platform & Post Type", "Over Time", "Raw Data"]
    )

    with box_tab:
        st.caption(
            "Box = interquartile range, line = median, whiskers = 1.5 IQR clamped to the observed range."
        )
        st.plotly_chart(create_box_plot(summaries), use_container_width=True)

    with bar_tab:
        st.caption("Platforms without posts of a given type show a zero-height bar.")
        st.plotly_chart(create_grouped_bar_chart(grouped), use_container_width=True)

    with line_tab:
        st.plotly_chart(create_line_chart(daily), use_container_width=True)

    with raw_tab:
        st.subheader("Five-Number Summaries")
        st.dataframe(summaries_to_dataframe(summaries), use_container_width=True)

        st.subheader("Average Likes by Platform and Post Type")
        st.dataframe(grouped, use_container_width=True, hide_index=True)
        st.download_button(
            label="Download as CSV",
            data=export_csv(grouped),
            file_name=GROUPED_MEAN_FILENAME,
            mime="text/csv",
            key="download_grouped",
        )

        st.subheader("Average Likes by Date")
        st.dataframe(daily, use_container_width=True, hide_index=True)
        st.download_button(
            label="Download as CSV",
            data=export_csv(daily),
            file_name=DAILY_MEAN_FILENAME,
            mime="text/csv",
            key="download_daily",
        )

        st.subheader("Records")
        st.dataframe(records, use_container_width=True)


if __name__ == "__main__":
    main()
