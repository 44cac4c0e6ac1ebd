"""Streamlit entry point: streamlit run streamlit_app.py"""

from engagement_viz.visualization.app import main

main()
