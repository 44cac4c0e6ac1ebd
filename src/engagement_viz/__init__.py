"""
engagement-viz: aggregate and chart social-media post engagement.

The package is split into a record loader, a pure aggregation core and a
plotly/streamlit rendering layer under ``engagement_viz.visualization``.
"""

from engagement_viz.aggregator import (
    average_by_date,
    average_by_platform_and_post_type,
    summarize_by_age_group,
)
from engagement_viz.errors import ConfigError, EngagementVizError, LoadError, ParseError
from engagement_viz.loader import load_records, parse_records

__all__ = [
    "average_by_date",
    "average_by_platform_and_post_type",
    "summarize_by_age_group",
    "load_records",
    "parse_records",
    "EngagementVizError",
    "LoadError",
    "ParseError",
    "ConfigError",
]
