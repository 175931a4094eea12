"""
End-to-end tests for the PipelineOrchestrator.
"""

import json
import os
import tempfile

import pytest
from src.exceptions import ParseError, TypeCoercionError
from src.orchestrator import PipelineOrchestrator

HEADER = (
    "review_id,user_id,app_name,app_category,review_text,review_language,rating,"
    "review_date,verified_purchase,device_type,num_helpful_votes,app_version,"
    "user_age,user_country,user_gender"
)

ROWS = [
    '1,101,Spotify,Music,"Love it, great mixes",en,4.8,2024-05-02,True,Android,10,8.9.1,25,USA,Male',
    '2,102,Spotify,Music,Keeps crashing,es,1.2,2024-05-03,False,iOS,3,8.9.1,31,Spain,',
    '3,103,Netflix,Entertainment,Decent,en,3.0,2024-05-04,True,Android,0,15.2,44,UK,Female',
    '4,104,Spotify,Music,Okay,de,,2024-05-05,True,Android,1,8.9.0,52,Germany,Female',
    '5,105,Zoom,Business,Fine for calls,en,4.0,2024-05-06,True,Windows,2,,38,India,Male',
    '6,106,Spotify,Music,Best app,fr,5.0,2024-05-07,true,Android,7,9.0.0,19,France,Other',
]


def write_dataset(directory: str, rows=ROWS) -> str:
    path = os.path.join(directory, "reviews.csv")
    with open(path, 'w', encoding='utf-8') as f:
        f.write(HEADER + "\n" + "\n".join(rows) + "\n")
    return path


def test_run_without_output_dir():
    """Test full pipeline in memory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_dataset(tmpdir)
        report = PipelineOrchestrator().run(path)

    # Rows 4 (empty rating) and 5 (empty app_version) are dropped
    assert report.total_records == 6
    assert report.total_reviews == 4
    assert report.dropped_records == 2

    assert [s.to_dict() for s in report.sentiment_by_app] == [
        {"app_name": "Spotify", "positive": 2, "neutral": 0, "negative": 1},
        {"app_name": "Netflix", "positive": 0, "neutral": 1, "negative": 0},
    ]
    assert [s.lang_name for s in report.sentiment_by_language] == ["en", "es", "fr"]

    summary = report.summary
    assert summary.most_reviewed_app == "Spotify"
    assert summary.most_reviews == 3
    assert summary.most_used_device == "Android"
    assert summary.most_devices == 2
    assert summary.avg_rating == pytest.approx((4.8 + 1.2 + 5.0) / 3)


def test_run_writes_reports():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_dataset(tmpdir)
        output_dir = os.path.join(tmpdir, "output")

        orchestrator = PipelineOrchestrator(output_dir=output_dir, save_cleaned=True)
        orchestrator.run(path)

        with open(os.path.join(output_dir, "analysis_report.json")) as f:
            saved = json.load(f)
        with open(os.path.join(output_dir, "cleaned_reviews.json")) as f:
            cleaned = json.load(f)

        assert os.path.exists(os.path.join(output_dir, "sentiment_by_app.csv"))
        assert os.path.exists(os.path.join(output_dir, "sentiment_by_language.csv"))

    assert saved["total_reviews"] == 4
    assert saved["summary"]["mostReviewedApp"] == "Spotify"
    assert saved["sentiment_by_language"][0]["lang_name"] == "en"

    assert [r["review_id"] for r in cleaned] == [1, 2, 3, 6]
    assert cleaned[1]["user"]["user_gender"] == ""
    assert cleaned[3]["verified_purchase"] is False
    assert cleaned[0]["review_date"] == "2024-05-02"


def test_cleaned_reviews_not_saved_by_default():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_dataset(tmpdir)
        output_dir = os.path.join(tmpdir, "output")

        PipelineOrchestrator(output_dir=output_dir, save_cleaned=False).run(path)

        assert os.path.exists(os.path.join(output_dir, "analysis_report.json"))
        assert not os.path.exists(os.path.join(output_dir, "cleaned_reviews.json"))


def test_missing_file_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ParseError):
            PipelineOrchestrator().run(os.path.join(tmpdir, "nope.csv"))


def test_bad_value_aborts_run():
    """Test that a coercion failure aborts with no report written."""
    rows = ROWS + ['7,107,Zoom,Business,Meh,en,abc,2024-05-08,True,Mac,0,5.0,40,Canada,Male']

    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_dataset(tmpdir, rows)
        output_dir = os.path.join(tmpdir, "output")

        with pytest.raises(TypeCoercionError):
            PipelineOrchestrator(output_dir=output_dir).run(path)

        assert not os.path.exists(os.path.join(output_dir, "analysis_report.json"))


def test_semicolon_dataset():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "reviews.csv")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(HEADER.replace(",", ";") + "\n")
            f.write("1;101;Zoom;Business;Good;en;4.5;2024-05-06;True;Mac;2;5.0;38;India;Male\n")

        report = PipelineOrchestrator(delimiter=";").run(path)

    assert report.total_reviews == 1
    assert report.summary.most_used_device == "Mac"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
