"""
Tests for the command-line entry point.
"""

import pandas as pd
import pytest

from engagement_viz.cli import main, parse_config, run
from engagement_viz.config import (
    BAR_PLOT_FILENAME,
    BOX_PLOT_FILENAME,
    DAILY_MEAN_FILENAME,
    GROUPED_MEAN_FILENAME,
    LINE_PLOT_FILENAME,
)


def test_parse_config_reads_config_argument(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("bucket: timestamp\n", encoding="utf-8")

    config = parse_config([f"config={path}", "data=x.csv"])

    assert config.bucket == "timestamp"
    assert config.data == "x.csv"


def test_run_exports_tables(sample_csv_file, tmp_path):
    out_dir = tmp_path / "out"
    config = parse_config(
        [f"data={sample_csv_file}", f"output_dir={out_dir}", "verbose=false"]
    )

    result = run(config)

    assert set(result) == {"summaries", "grouped", "daily"}
    grouped = pd.read_csv(out_dir / GROUPED_MEAN_FILENAME)
    assert list(grouped.columns) == ["Platform", "PostType", "AvgLikes"]
    first = grouped.iloc[0]
    assert (first["Platform"], first["PostType"], first["AvgLikes"]) == (
        "Instagram",
        "Image",
        20.0,
    )

    daily = pd.read_csv(out_dir / DAILY_MEAN_FILENAME)
    assert list(daily.columns) == ["Date", "AvgLikes"]
    assert daily["Date"].tolist() == ["2024-03-01", "2024-03-02", "2024-03-03"]
    assert daily["AvgLikes"].tolist() == [15.0, 35.0, 30.0]

    assert not (out_dir / BOX_PLOT_FILENAME).exists()


def test_run_exports_charts_when_requested(sample_csv_file, tmp_path):
    out_dir = tmp_path / "out"
    config = parse_config(
        [
            f"data={sample_csv_file}",
            f"output_dir={out_dir}",
            "export_html=true",
            "verbose=false",
        ]
    )

    run(config)

    for name in (BOX_PLOT_FILENAME, BAR_PLOT_FILENAME, LINE_PLOT_FILENAME):
        html = (out_dir / name).read_text(encoding="utf-8")
        assert "plotly" in html.lower()


def test_run_without_output_dir_writes_nothing(sample_csv_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = parse_config([f"data={sample_csv_file}", "output_dir=null", "verbose=false"])

    run(config)

    assert list(tmp_path.iterdir()) == [sample_csv_file]


def test_main_prints_tables(sample_csv_file, tmp_path, capsys):
    main([f"data={sample_csv_file}", f"output_dir={tmp_path / 'out'}"])

    output = capsys.readouterr().out
    assert "Likes by Age Group" in output
    assert "Average Likes by Platform and Post Type" in output
    assert "2024-03-02" in output
    assert "✅ Done!" in output


def test_main_reports_bad_rows(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text(
        "Date,Platform,PostType,AgeGroup,Likes\n"
        "2024-01-02,X,Video,18-24,5\n"
        "2024-01-02,X,Video,18-24,lots\n",
        encoding="utf-8",
    )

    main([f"data={path}", "output_dir=null"])

    assert "1 of 2 rows have non-numeric likes" in capsys.readouterr().out


def test_main_reports_skipped_rows(tmp_path, capsys):
    path = tmp_path / "ragged.csv"
    path.write_text(
        "Date,Platform,PostType,AgeGroup,Likes\n"
        "2024-01-02,X,Video,18-24,5\n"
        "2024-01-02,X,Video,18-24,5,6\n"
        "2024-01-03,X,Video,18-24,6\n",
        encoding="utf-8",
    )

    main([f"data={path}", "output_dir=null"])

    assert "1 rows with too many fields were skipped" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["data=does/not/exist.csv"],
        ["bucket=fortnight"],
    ],
)
def test_main_exits_on_error(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1
    assert "❌ Error" in capsys.readouterr().out


def test_main_exits_on_missing_columns(tmp_path, capsys):
    path = tmp_path / "partial.csv"
    path.write_text("Date,Likes\n2024-01-02,5\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main([f"data={path}"])

    assert "missing required columns" in capsys.readouterr().out
