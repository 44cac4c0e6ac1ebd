"""
Constants and configuration for the visualization module.
"""

# Chart configuration
CHART_HEIGHT = 500
BOX_PLOT_WIDTH = 500
WIDE_CHART_WIDTH = 800
LEGEND_CONFIG = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
CHART_MARGIN = dict(t=80, r=20, b=60, l=60)

# Colors
POST_TYPE_COLORS = ["#1f77b4", "#ff7f0e", "#2ca02c"]
BOX_FILL_COLOR = "lightblue"
BOX_LINE_COLOR = "black"
LINE_COLOR = "steelblue"

# Axis labels
AGE_GROUP_LABEL = "Age Group"
PLATFORM_LABEL = "Platform"
POST_TYPE_LABEL = "Post Type"
DATE_LABEL = "Date"
LIKES_LABEL = "Number of Likes"
AVG_LIKES_LABEL = "Average Number of Likes"
