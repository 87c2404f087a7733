from notesense.scripts import perf_harness


def test_time_detect_reports_issues():
    median, issues = perf_harness.time_detect("knee sore, wrist tight", runs=3)

    assert median >= 0.0
    assert issues == 2


def test_keystroke_timing_covers_every_prefix():
    assert perf_harness.time_keystrokes("") == 0.0
    assert perf_harness.time_keystrokes("knee sore") >= 0.0


def test_main_prints_summary(capsys):
    perf_harness.main(["--runs", "3", "--text", "shoulder pain", "--keystrokes"])

    out = capsys.readouterr().out
    assert "detect median" in out
    assert "3 issues" in out
    assert "worst keystroke" in out


def test_slow_keystroke_fails_the_run(monkeypatch, capsys):
    monkeypatch.setattr(perf_harness, "time_detect", lambda text, runs: (0.0, 1))
    monkeypatch.setattr(perf_harness, "time_keystrokes", lambda text: perf_harness.DETECT_BUDGET_S * 10)

    assert perf_harness.main(["--runs", "1", "--keystrokes"]) == 1
    assert "worst keystroke" in capsys.readouterr().out


def test_fast_run_passes(monkeypatch):
    monkeypatch.setattr(perf_harness, "time_detect", lambda text, runs: (0.0, 1))
    monkeypatch.setattr(perf_harness, "time_keystrokes", lambda text: 0.0)

    assert perf_harness.main(["--runs", "1", "--keystrokes"]) == 0
