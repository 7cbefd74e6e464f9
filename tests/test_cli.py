from __future__ import annotations

import json

from typer.testing import CliRunner

from cli import app as treelist_app


def test_sort_reads_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(treelist_app, ["sort"], input="5 3 8\n1 3\n")
    assert result.exit_code == 0
    assert result.stdout.split() == ["1", "3", "3", "5", "8"]


def test_sort_reads_file_in_reverse(tmp_path) -> None:
    source = tmp_path / "words.txt"
    source.write_text("pear apple fig\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(treelist_app, ["sort", str(source), "--type", "str", "--reverse"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["pear", "fig", "apple"]


def test_sort_rejects_unparseable_tokens() -> None:
    runner = CliRunner()
    result = runner.invoke(treelist_app, ["sort", "--type", "int"], input="1 two 3")
    assert result.exit_code == 2


def test_bench_writes_artifact(tmp_path) -> None:
    artifact = tmp_path / "bench.json"
    runner = CliRunner()
    result = runner.invoke(
        treelist_app,
        ["bench", "--count", "200", "--remove-fraction", "0.25", "--seed", "3", "--output", str(artifact)],
    )
    assert result.exit_code == 0
    assert "inserted=200" in result.stdout
    payload = json.loads(artifact.read_text(encoding="utf-8"))
    assert payload["schema_id"] == "treelist.benchmark.v1"
    assert payload["final_size"] == 150
    assert payload["seed"] == 3
    assert payload["height"] <= payload["height_bound"]


def test_check_reports_success() -> None:
    runner = CliRunner()
    result = runner.invoke(treelist_app, ["check", "--operations", "300", "--seed", "11"])
    assert result.exit_code == 0
    assert result.stdout.startswith("ok: 300 operations")


def test_check_reports_failure(monkeypatch) -> None:
    def fake_self_check(*, operations, seed):
        raise AssertionError("get(0) returned 2, expected 1")

    monkeypatch.setattr("cli.main.run_self_check", fake_self_check)
    runner = CliRunner()
    result = runner.invoke(treelist_app, ["check"])
    assert result.exit_code == 1
