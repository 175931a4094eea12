"""
Tests for the CLI entry point.
"""

import os
import sys

import pytest
import main

HEADER = (
    "review_id,user_id,app_name,app_category,review_text,review_language,rating,"
    "review_date,verified_purchase,device_type,num_helpful_votes,app_version,"
    "user_age,user_country,user_gender"
)


def run_cli(monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    return excinfo.value.code


def test_cli_success(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    dataset = tmp_path / "reviews.csv"
    dataset.write_text(
        HEADER + "\n"
        "1,11,A,Games,Fun,en,5,2024-01-01,True,phone,0,1.0,20,US,\n"
        "2,12,A,Games,Bad,en,1,2024-01-02,True,tablet,0,1.0,21,US,Male\n",
        encoding="utf-8"
    )
    output_dir = tmp_path / "output"

    code = run_cli(monkeypatch, "--input", str(dataset), "--output-dir", str(output_dir))

    assert code == 0
    out = capsys.readouterr().out
    assert "Most reviewed app: A (2 reviews)" in out
    assert "Most used device: phone (1 reviews)" in out
    assert "Average rating: 3.00" in out
    assert "A: 1 / 0 / 1" in out
    assert os.path.exists(output_dir / "analysis_report.json")


def test_cli_invalid_input(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)

    code = run_cli(monkeypatch, "--input", str(tmp_path / "missing.csv"))

    assert code == 1
    assert "Invalid input" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
