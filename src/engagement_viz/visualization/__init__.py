"""
engagement-viz visualization package.

This package provides plotly chart builders and a Streamlit dashboard for
the derived engagement tables.
"""

from engagement_viz.visualization.dashboard import launch_dashboard
from engagement_viz.visualization.app import main

__all__ = ["launch_dashboard", "main"]
