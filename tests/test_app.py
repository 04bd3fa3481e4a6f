"""Tests for the batch runner entry point."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

import pandas as pd

from app import main
from data.sample_data import generate_sample_csvs


class TestMain:
    def test_runs_sample_batch(self, tmp_path, capsys):
        generate_sample_csvs(str(tmp_path))
        output = tmp_path / "allocations.csv"

        code = main([
            "--centers", str(tmp_path / "centers.csv"),
            "--applicants", str(tmp_path / "applicants.csv"),
            "--seed", "3",
            "--output", str(output),
        ])

        assert code == 0
        printed = capsys.readouterr().out
        assert "overall" in printed
        assert "Balance score" in printed
        written = pd.read_csv(output)
        assert len(written) > 0
        assert written["Region"].isin(["central", "eastern", "western"]).all()

    def test_invalid_input_returns_error_code(self, tmp_path):
        generate_sample_csvs(str(tmp_path))
        bad = pd.read_csv(tmp_path / "centers.csv")
        bad["Region"] = "northern"
        bad.to_csv(tmp_path / "centers.csv", index=False)

        code = main([
            "--centers", str(tmp_path / "centers.csv"),
            "--applicants", str(tmp_path / "applicants.csv"),
        ])
        assert code == 1

    def test_blank_capacity_returns_error_code(self, tmp_path):
        generate_sample_csvs(str(tmp_path))
        bad = pd.read_csv(tmp_path / "centers.csv")
        bad["Capacity"] = bad["Capacity"].astype(float)
        bad.loc[1, "Capacity"] = None
        bad.to_csv(tmp_path / "centers.csv", index=False)

        code = main([
            "--centers", str(tmp_path / "centers.csv"),
            "--applicants", str(tmp_path / "applicants.csv"),
        ])
        assert code == 1

    def test_log_level_flag_suppresses_info(self, tmp_path, caplog):
        generate_sample_csvs(str(tmp_path))
        root = logging.getLogger()
        previous = root.level
        try:
            code = main([
                "--centers", str(tmp_path / "centers.csv"),
                "--applicants", str(tmp_path / "applicants.csv"),
                "--seed", "1",
                "--log-level", "ERROR",
            ])
            assert code == 0
            assert not logging.getLogger("engine.allocation_engine").isEnabledFor(logging.INFO)
            assert not any(
                r.levelno < logging.ERROR and r.name in ("app", "engine.allocation_engine")
                for r in caplog.records
            )
        finally:
            root.setLevel(previous)
