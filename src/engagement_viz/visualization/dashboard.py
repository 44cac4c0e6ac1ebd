"""
Dashboard launcher with pre-flight checks.
"""

import subprocess
import sys
from pathlib import Path

from engagement_viz.config import DEFAULT_DATA_PATH

APP_SCRIPT = "streamlit_app.py"


def build_streamlit_command(app_script: str = APP_SCRIPT) -> list:
    """Command line used to start the Streamlit server."""
    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        app_script,
        "--browser.gatherUsageStats",
        "false",
    ]


def launch_dashboard(data_path: str = DEFAULT_DATA_PATH):
    """Launch the Streamlit dashboard with checks - entry point for dashboard command."""
    print("🚀 Launching Engagement Dashboard...")

    # Check the default dataset exists
    dataset = Path(data_path)
    if not dataset.is_file():
        print(f"⚠️  Default dataset not found at {dataset}")
        print("Upload a CSV in the dashboard, or place your data there first:")
        print(f"  cp socialMedia.csv {DEFAULT_DATA_PATH}")
    else:
        size_kb = dataset.stat().st_size / 1024
        print(f"📊 Found dataset: {dataset} ({size_kb:.1f} KB)")

    print("\n🌐 Starting dashboard server...")
    print("👉 Dashboard will open in your browser automatically")
    print("👉 Press Ctrl+C to stop the server")

    try:
        subprocess.run(build_streamlit_command(), check=True)
    except KeyboardInterrupt:
        print("\n✅ Dashboard stopped")
    except subprocess.CalledProcessError as e:
        print(f"❌ Error launching dashboard: {e}")
        sys.exit(1)
