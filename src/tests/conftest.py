"""
Shared fixtures for engagement-viz tests.
"""

import pandas as pd
import pytest

from engagement_viz.loader import records_from_frame

DEFAULT_ROW = {
    "Date": "2024-03-01 09:00",
    "Platform": "Instagram",
    "PostType": "Image",
    "AgeGroup": "18-24",
    "Likes": 0,
}


@pytest.fixture
def make_records():
    """Build a record table from partial row dicts (missing fields get defaults)."""

    def _make(rows):
        frame = pd.DataFrame([{**DEFAULT_ROW, **row} for row in rows])
        return records_from_frame(frame)

    return _make


@pytest.fixture
def sample_csv_text():
    """Small dataset in the source column layout."""
    return (
        "Platform,PostType,AgeGroup,Likes,Date\n"
        "Instagram,Image,18-24,10,2024-03-01 09:15:00\n"
        "Instagram,Video,18-24,20,2024-03-01 18:40:00\n"
        "Facebook,Link,25-34,30,2024-03-02 12:05:00\n"
        "Facebook,Image,25-34,40,2024-03-02 08:30:00\n"
        "Instagram,Image,18-24,30,2024-03-03 10:00:00\n"
    )


@pytest.fixture
def sample_csv_file(tmp_path, sample_csv_text):
    """The sample dataset written to disk."""
    path = tmp_path / "socialMedia.csv"
    path.write_text(sample_csv_text, encoding="utf-8")
    return path
