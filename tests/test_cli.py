import json

from scripts.evaluate_cards import main


def test_cli_prints_json(capsys):
    assert main(["As", "Ah", "Kd", "Kc", "Qs"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["As, Ah, Kd, Kc, Qs"]["isTwoPair"] is True


def test_cli_non_strict(capsys):
    assert main(["--no-strict", "As", "Ks", "Qs", "Js", "Ts"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["As, Ks, Qs, Js, Ts"]["isFlush"] is True


def test_cli_reports_bad_cards(capsys):
    assert main(["As", "Ks", "Qs", "Js"]) == 2
    assert "Expected at least 5 cards" in capsys.readouterr().err
