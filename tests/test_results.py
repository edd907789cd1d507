import json
from pathlib import Path

from wfsqlcheck.results import Result, dumps_results, save_results, summarize


def test_to_dict_uses_report_keys() -> None:
    r = Result("db/001.sql", '{"a":1}', "boom")
    assert r.to_dict() == {"fileName": "db/001.sql", "jsonData": '{"a":1}', "error": "boom"}


def test_dumps_uses_single_space_indent() -> None:
    out = dumps_results([Result("a.sql", "", "e")])
    assert out == '[\n {\n  "fileName": "a.sql",\n  "jsonData": "",\n  "error": "e"\n }\n]'


def test_dumps_empty_list() -> None:
    assert dumps_results([]) == "[]"


def test_dumps_keeps_non_ascii() -> None:
    assert "Zürich" in dumps_results([Result("a.sql", '{"city":"Zürich"}', "e")])


def test_dumps_escapes_html_characters() -> None:
    out = dumps_results([Result("a.sql", '{"q":"a<b && c>d"}', "line\u2028sep")])
    assert "<" not in out and ">" not in out and "&" not in out
    assert "a\\u003cb \\u0026\\u0026 c\\u003ed" in out
    assert "line\\u2028sep" in out
    assert json.loads(out)[0]["jsonData"] == '{"q":"a<b && c>d"}'


def test_save_results_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "suggestions.json"
    path.write_text("stale content that is longer than the new report", encoding="utf-8")
    save_results([Result("a.sql", "{}", "x"), Result("a.sql", "{}", "x")], path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [
        {"fileName": "a.sql", "jsonData": "{}", "error": "x"},
        {"fileName": "a.sql", "jsonData": "{}", "error": "x"},
    ]


def test_save_results_creates_parent_dirs(tmp_path: Path) -> None:
    path = save_results([], tmp_path / "out" / "report.json")
    assert path.read_text(encoding="utf-8") == "[]"


def test_summarize_counts_per_file_in_first_seen_order() -> None:
    results = [Result("b.sql", "", "e"), Result("a.sql", "", "e"), Result("b.sql", "", "e")]
    assert summarize(results) == ["b.sql: 2 issue(s)", "a.sql: 1 issue(s)"]
