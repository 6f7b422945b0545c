from __future__ import annotations
import io
import json

from pattern_matcher.cli import _should_color, main, run

INPUT = """7
*,b,*
a,*,*
*,*,c
foo,bar,baz
w,x,*,*
t,r,e,w
w,*,y,z
5
/w/x/y/z/
a/b/c
foo/
foo/bar/
foo/bar/baz/
"""


def _write(tmp_path, text):
    f = tmp_path / "input.txt"
    f.write_text(text, encoding="utf-8")
    return f


def test_one_line_per_path(tmp_path, capsys):
    assert main(["--file", str(_write(tmp_path, INPUT))]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["w,*,y,z", "a,*,*", "NO MATCH", "NO MATCH", "foo,bar,baz"]


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nfoo,*\n1\n/foo/bar/\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "foo,*\n"


def test_json_output(tmp_path, capsys):
    assert main(["--file", str(_write(tmp_path, INPUT)), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["results"][0] == {"path": "/w/x/y/z/", "best": "w,*,y,z"}
    assert payload["stats"]["paths"] == 5
    assert payload["stats"]["unmatched"] == 2
    assert payload["stats"]["ties"] == 1  # a/b/c
    assert payload["findings"] == []


def test_json_severity_filter(tmp_path, capsys):
    text = "3\n*,**\n*,**\nx\n0\n"
    assert main(["--file", str(_write(tmp_path, text)), "--json", "--severity", "risky"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [f["code"] for f in payload["findings"]] == ["LITERAL_DOUBLE_STAR", "LITERAL_DOUBLE_STAR"]
    assert payload["stats"]["low"] == 1  # stats ignore the filter


def test_lint_report_goes_to_stderr(tmp_path, capsys):
    text = "2\nfoo,*\nfoo,*\n1\nfoo/x\n"
    assert main(["--file", str(_write(tmp_path, text)), "--lint", "--color", "never"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "foo,*\n"
    assert "Statistics" in captured.err
    assert "[low] DUPLICATE" in captured.err
    assert "\033[" not in captured.err


def test_lint_report_colored(tmp_path, capsys):
    text = "1\n\n1\n/\n"
    assert main(["--file", str(_write(tmp_path, text)), "--lint", "--color", "always"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "\n"  # empty pattern matches the empty path
    assert "\033[31m" in captured.err


def test_malformed_input_exit_code(tmp_path, capsys):
    assert main(["--file", str(_write(tmp_path, "many\na\n"))]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Malformed input" in captured.err


def test_missing_file_exit_code(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt")]) == 1
    assert "Cannot read input" in capsys.readouterr().err


def test_run_collects_stats():
    results, stats, findings = run(["Documents,*,JohnSmith", "*,Clients,JohnSmith"],
                                   ["Documents/Clients/JohnSmith", "x/y"])
    assert [r.best for r in results] == ["Documents,*,JohnSmith", "NO MATCH"]
    assert (stats.matched, stats.unmatched, stats.ties) == (1, 1, 1)
    assert findings == []


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_auto_color_on_a_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert _should_color("auto", _Tty()) is True
    assert _should_color("auto", io.StringIO()) is False


def test_no_color_env_disables_auto(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert _should_color("auto", _Tty()) is False
    assert _should_color("always", _Tty()) is True


def test_debug_flag_logs_tree_building(tmp_path, capsys):
    assert main(["--file", str(_write(tmp_path, INPUT)), "--debug"]) == 0
    err = capsys.readouterr().err
    assert "built pattern store: 7 patterns" in err
    assert "built tie-break store" in err  # a/b/c ties


def test_verbose_flag_logs_summary(tmp_path, capsys):
    assert main(["--file", str(_write(tmp_path, INPUT)), "-v"]) == 0
    err = capsys.readouterr().err
    assert "3 paths matched, 2 unmatched, 1 ties resolved" in err
    assert "built pattern store" not in err


def test_default_level_is_quiet(tmp_path, capsys):
    assert main(["--file", str(_write(tmp_path, INPUT))]) == 0
    assert capsys.readouterr().err == ""
