"""Smoke test for the walk-through script."""

from primefield.demo import run_demo


def test_demo_runs(capsys):
    run_demo.main()
    out = capsys.readouterr().out
    assert "a + b = 6" in out
    assert "a - b = 8" in out
    assert "a * b = 6" in out
    assert "(check: (a / b) * b = 7)" in out
    assert "G.y recovered from G.x: True" in out
    for name in ("InvalidElement", "InvalidModulus", "FieldMismatch", "DivisionByZero"):
        assert name in out
