"""
Record loading for engagement datasets.

Reads a delimited text file (one post per row) into a pandas DataFrame with
normalized column names and typed values. Numeric and date fields that fail
to parse are kept as NaN/NaT so the aggregation layer can exclude them.
"""

import io
import re
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pandas as pd

from .errors import LoadError, ParseError

# Source header name -> normalized column name
REQUIRED_COLUMNS: Dict[str, str] = {
    "Date": "date",
    "Platform": "platform",
    "PostType": "post_type",
    "AgeGroup": "age_group",
    "Likes": "likes",
}

RECORD_COLUMNS: List[str] = [
    "date",
    "day",
    "platform",
    "post_type",
    "age_group",
    "likes",
]

DEFAULT_SEPARATOR = ","
DEFAULT_ENCODING = "utf-8"

_CATEGORY_COLUMNS = ("platform", "post_type", "age_group")


def _header_key(name: str) -> str:
    """Normalize a header name so 'Post Type', 'post_type' and 'PostType' match."""
    return re.sub(r"[^a-z0-9]", "", str(name).lower())


def strip_time_of_day(value: str) -> str:
    """Return the calendar-date part of a timestamp such as '2023-01-15 09:00'."""
    parts = str(value).strip().split(maxsplit=1)
    return parts[0] if parts else ""


def parse_day(dates: pd.Series) -> pd.Series:
    """Parse date strings to midnight-normalized timestamps (NaT if unparseable)."""
    day_text = dates.fillna("").map(strip_time_of_day).astype(object)
    parsed = pd.to_datetime(
        day_text.where(day_text != ""), errors="coerce", format="mixed"
    )
    return parsed.dt.normalize()


def records_from_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize a raw dataset frame into the record layout.

    Header names are matched case-insensitively and extra columns are
    dropped. Raises ParseError if any required column is missing.
    """
    by_key = {_header_key(col): col for col in df.columns}
    missing = [
        name for name in REQUIRED_COLUMNS if _header_key(name) not in by_key
    ]
    if missing:
        raise ParseError(missing, found=list(df.columns))

    records = pd.DataFrame(
        {
            normalized: df[by_key[_header_key(source)]]
            for source, normalized in REQUIRED_COLUMNS.items()
        }
    )

    records["date"] = records["date"].fillna("").astype(str).str.strip()
    for col in _CATEGORY_COLUMNS:
        records[col] = records[col].fillna("").astype(str).str.strip()

    # Malformed counts become NaN rather than zero
    likes_text = records["likes"].astype(str).str.strip()
    records["likes"] = pd.to_numeric(likes_text, errors="coerce").astype(float)
    records["day"] = parse_day(records["date"])

    return records[RECORD_COLUMNS].reset_index(drop=True)


def _read_frame(source, sep: str, encoding: str) -> Tuple[pd.DataFrame, int]:
    """Read delimited text as strings; rows with too many fields are skipped and counted."""
    skipped: List[List[str]] = []

    def _skip_bad_line(fields: List[str]) -> None:
        skipped.append(fields)
        return None

    try:
        frame = pd.read_csv(
            source,
            sep=sep,
            dtype=str,
            keep_default_na=False,
            encoding=encoding,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except pd.errors.EmptyDataError as e:
        raise LoadError("Dataset is empty (no header row)") from e
    except pd.errors.ParserError as e:
        raise LoadError(f"Could not parse delimited text: {e}") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Could not decode dataset as {encoding}: {e}") from e
    return frame, len(skipped)


def _build_records(frame: pd.DataFrame, skipped_rows: int) -> pd.DataFrame:
    records = records_from_frame(frame)
    records.attrs["skipped_rows"] = skipped_rows
    return records


def load_records(
    path: Union[str, Path],
    sep: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING,
) -> pd.DataFrame:
    """Load a delimited engagement dataset from disk."""
    data_path = Path(path)
    if not data_path.is_file():
        raise LoadError(f"Dataset not found: {data_path}")

    try:
        frame, skipped_rows = _read_frame(data_path, sep, encoding)
    except OSError as e:
        raise LoadError(f"Could not read {data_path}: {e}") from e

    return _build_records(frame, skipped_rows)


def parse_records(text: str, sep: str = DEFAULT_SEPARATOR) -> pd.DataFrame:
    """Parse an in-memory delimited dataset (e.g. an uploaded file)."""
    if not text or not text.strip():
        raise LoadError("Dataset is empty (no header row)")
    return _build_records(*_read_frame(io.StringIO(text), sep, DEFAULT_ENCODING))


def describe_quality(records: pd.DataFrame) -> Dict[str, int]:
    """Count rows whose fields failed to parse, plus ragged rows skipped on read."""
    return {
        "rows": int(len(records)),
        "invalid_likes": int(records["likes"].isna().sum()),
        "invalid_dates": int(records["day"].isna().sum()),
        "skipped_rows": int(records.attrs.get("skipped_rows", 0)),
    }
