#!/usr/bin/env python3
"""CLI for aggregating an engagement dataset and exporting the derived tables."""

import sys
from typing import Dict, List, Optional

import pandas as pd
from omegaconf import DictConfig

from engagement_viz.aggregator import (
    average_by_date,
    average_by_platform_and_post_type,
    summarize_by_age_group,
)
from engagement_viz.config import load_config
from engagement_viz.errors import ConfigError, LoadError
from engagement_viz.export import write_charts, write_tables
from engagement_viz.loader import describe_quality, load_records
from engagement_viz.visualization.charts import (
    create_box_plot,
    create_grouped_bar_chart,
    create_line_chart,
)

# Output formatting constants
TABLE_WIDTH = 80
GROUP_COLUMN_WIDTH = 12
STAT_COLUMN_WIDTH = 9
PLATFORM_COLUMN_WIDTH = 16
POST_TYPE_COLUMN_WIDTH = 12
DATE_COLUMN_WIDTH = 24
AVG_COLUMN_WIDTH = 10

SUMMARY_FIELDS = ["min", "lower_whisker", "q1", "median", "q3", "upper_whisker", "max"]
SUMMARY_HEADERS = ["Min", "Low W.", "Q1", "Median", "Q3", "High W.", "Max"]


def print_age_group_summary(summaries: Dict[str, Dict[str, float]]):
    """Print the five-number summary table."""
    if not summaries:
        print("⚠️  No numeric likes available for age-group summaries")
        return

    print("📦 Likes by Age Group:")
    header = f"{'Group':<{GROUP_COLUMN_WIDTH}}" + "".join(
        f"{h:>{STAT_COLUMN_WIDTH}}" for h in SUMMARY_HEADERS
    )
    print(header + f"{'N':>{STAT_COLUMN_WIDTH - 3}}")
    print("─" * TABLE_WIDTH)
    for age_group, stats in summaries.items():
        values = "".join(
            f"{stats[field]:>{STAT_COLUMN_WIDTH}.1f}" for field in SUMMARY_FIELDS
        )
        print(
            f"{age_group:<{GROUP_COLUMN_WIDTH}}{values}{stats['count']:>{STAT_COLUMN_WIDTH - 3}d}"
        )


def print_grouped_means(grouped: pd.DataFrame):
    """Print mean likes per platform and post type."""
    if grouped.empty:
        print("⚠️  No platform/post type averages available")
        return

    print("\n📊 Average Likes by Platform and Post Type:")
    print(
        f"{'Platform':<{PLATFORM_COLUMN_WIDTH}} {'Post Type':<{POST_TYPE_COLUMN_WIDTH}} {'Avg Likes':>{AVG_COLUMN_WIDTH}}"
    )
    print("─" * TABLE_WIDTH)
    for row in grouped.itertuples(index=False):
        print(
            f"{row.platform:<{PLATFORM_COLUMN_WIDTH}} {row.post_type:<{POST_TYPE_COLUMN_WIDTH}} {row.avg_likes:>{AVG_COLUMN_WIDTH}.2f}"
        )


def print_daily_means(daily: pd.DataFrame):
    """Print the chronological series of mean likes."""
    if daily.empty:
        print("⚠️  No dated records available for the time series")
        return

    print(f"\n📈 Average Likes by Date ({len(daily)} points):")
    print(f"{'Date':<{DATE_COLUMN_WIDTH}} {'Avg Likes':>{AVG_COLUMN_WIDTH}}")
    print("─" * TABLE_WIDTH)
    for row in daily.itertuples(index=False):
        print(f"{row.date:<{DATE_COLUMN_WIDTH}} {row.avg_likes:>{AVG_COLUMN_WIDTH}.2f}")


def print_quality_warnings(records: pd.DataFrame):
    """Report rows excluded from the aggregates."""
    quality = describe_quality(records)
    if quality["invalid_likes"]:
        print(
            f"⚠️  {quality['invalid_likes']} of {quality['rows']} rows have non-numeric likes (excluded)"
        )
    if quality["invalid_dates"]:
        print(
            f"⚠️  {quality['invalid_dates']} of {quality['rows']} rows have unparseable dates (excluded from time series)"
        )
    if quality["skipped_rows"]:
        print(f"⚠️  {quality['skipped_rows']} rows with too many fields were skipped")


def parse_config(argv: Optional[List[str]] = None) -> DictConfig:
    """Parse CLI configuration (``key=value`` arguments, optional ``config=file.yaml``)."""
    args = list(sys.argv[1:] if argv is None else argv)

    config_path = None
    overrides = []
    for arg in args:
        if arg.startswith("config="):
            config_path = arg.split("=", 1)[1]
        else:
            overrides.append(arg)

    return load_config(config_path, overrides)


def print_configuration(config: DictConfig):
    """Print run configuration."""
    print(f"Dataset: {config.data}")
    print(f"Date bucket: {config.bucket}")
    if config.output_dir:
        print(f"Output directory: {config.output_dir}")
    print("-" * 50)


def run(config: DictConfig) -> Dict[str, object]:
    """Load, aggregate and optionally export; returns the derived tables."""
    verbose = config.verbose

    if verbose:
        print("🔄 Loading records...")
    records = load_records(config.data, sep=config.sep, encoding=config.encoding)
    if verbose:
        print(f"✅ Loaded {len(records):,} records")
        print_quality_warnings(records)

    summaries = summarize_by_age_group(records)
    grouped = average_by_platform_and_post_type(records)
    daily = average_by_date(records, bucket=config.bucket)

    if verbose:
        print()
        print_age_group_summary(summaries)
        print_grouped_means(grouped)
        print_daily_means(daily)

    if config.output_dir:
        written = write_tables(config.output_dir, grouped, daily)
        if config.export_html:
            written.update(
                write_charts(
                    config.output_dir,
                    create_box_plot(summaries),
                    create_grouped_bar_chart(grouped),
                    create_line_chart(daily),
                )
            )
        if verbose:
            print("\n💾 Wrote:")
            for path in written.values():
                print(f"  - {path}")

    return {"summaries": summaries, "grouped": grouped, "daily": daily}


def main(argv: Optional[List[str]] = None):
    """Main CLI function."""
    print("🚀 Starting engagement-viz")

    try:
        config = parse_config(argv)
        if config.verbose:
            print_configuration(config)
        run(config)
        print("\n✅ Done!")

    except KeyboardInterrupt:
        print("\n❌ Interrupted by user")
        sys.exit(1)
    except (ConfigError, LoadError) as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error writing output: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
