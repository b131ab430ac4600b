# tests/test_pipeline.py

import pandas as pd
import pytest
import yaml

from netflix_analytics.main_pipeline import AnalyticsPipeline, main
from netflix_analytics.queries.registry import QUERY_REGISTRY


@pytest.fixture
def workspace(tmp_path, records):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    raw = pd.DataFrame(records).rename(columns={"casts": "cast"})
    raw.to_csv(data_dir / "netflix_titles.csv", index=False)
    return tmp_path


def _write_config(workspace, **overrides):
    config = {
        "logging": {"level": "DEBUG"},
        "input": {"file_path": "data/netflix_titles.csv"},
        "output": {
            "save_results": True,
            "results_dir": "data/results",
            "report_path": "data/results/summary_report.txt",
        },
        "classification": {"keywords": ["kill", "violence"]},
        "search": {"fold_accents": False},
        "queries": {"enabled": [], "params": {"top_countries": {"n": 2}}},
    }
    config.update(overrides)
    path = workspace / "config.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


def test_pipeline_runs_all_queries_and_writes_outputs(workspace):
    config_path = _write_config(workspace)
    results = AnalyticsPipeline(config_path).run()

    assert set(results) == set(QUERY_REGISTRY)
    assert list(results["top_countries"]["country"]) == ["India", "United States"]

    results_dir = workspace / "data" / "results"
    saved = pd.read_csv(results_dir / "top_countries.csv")
    assert list(saved["total_titles"]) == [5, 4]
    assert (results_dir / "country_breakdown.csv").exists()

    report = (results_dir / "summary_report.txt").read_text(encoding="utf-8")
    assert "Gesamtzahl der Titel: 10" in report
    assert "[top_countries]" in report


def test_pipeline_only_selected_queries(workspace):
    config_path = _write_config(workspace, output={"save_results": False})
    results = AnalyticsPipeline(config_path).run(only=["total_titles", "no_such_query"])
    assert list(results) == ["total_titles"]
    assert not (workspace / "data" / "results").exists()


def test_failing_query_does_not_stop_the_run(workspace):
    config_path = _write_config(
        workspace,
        output={"save_results": False},
        queries={
            "enabled": ["top_countries", "oldest_added_titles", "total_titles"],
            "params": {"top_countries": {"n": 0}, "oldest_added_titles": {"limit": 3}},
        },
    )
    results = AnalyticsPipeline(config_path).run()
    assert list(results) == ["total_titles"]


def test_keywords_come_from_config(workspace):
    config_path = _write_config(
        workspace,
        output={"save_results": False},
        classification={"keywords": ["villain"]},
    )
    results = AnalyticsPipeline(config_path).run(only=["content_category_counts"])
    counts = dict(results["content_category_counts"].values.tolist())
    assert counts == {"Good Content": 9, "Bad Content": 1}


def test_missing_input_returns_no_results(workspace):
    config_path = _write_config(workspace, input={"file_path": "data/missing.csv"})
    assert AnalyticsPipeline(config_path).run() == {}
    assert main(["--config", str(config_path)]) == 1


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        AnalyticsPipeline(tmp_path / "nope.yaml")


def test_main_list(capsys):
    assert main(["--list"]) == 0
    printed = capsys.readouterr().out.split()
    assert printed == list(QUERY_REGISTRY)


def test_main_runs_pipeline(workspace):
    config_path = _write_config(workspace, output={"save_results": False})
    assert main(["--config", str(config_path), "--only", "count_by_type"]) == 0


def test_malformed_row_does_not_abort_the_run(tmp_path, records):
    records[0]["release_year"] = "unknown"
    records[1]["type"] = "movie"
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    pd.DataFrame(records).rename(columns={"casts": "cast"}).to_csv(
        data_dir / "netflix_titles.csv", index=False)
    config_path = _write_config(tmp_path, output={"save_results": False})

    results = AnalyticsPipeline(config_path).run(only=["total_titles", "count_by_type"])
    assert results["total_titles"]["total_titles"].iloc[0] == 8
    assert main(["--config", str(config_path), "--only", "total_titles"]) == 0

    validation_dir = tmp_path / "data" / "validation_reports"
    assert "release_year" in (validation_dir / "catalog_report.txt").read_text(encoding="utf-8")
    invalid = pd.read_csv(validation_dir / "catalog_invalid_rows.csv")
    assert sorted(invalid["show_id"]) == ["s1", "s2"]
