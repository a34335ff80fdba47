import json

from typer.testing import CliRunner

from destructure.cli.app import app

runner = CliRunner()


def test_calc_prints_each_state() -> None:
    result = runner.invoke(app, ["calc", "5 + 4 × 3 ÷ 6"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "= 5 + 4 × 3 ÷ 6",
        "= 5 + 4 × 0.5",
        "= 5 + 2",
        "= 7",
    ]


def test_calc_verbose_names_rules() -> None:
    result = runner.invoke(app, ["calc", "--verbose", "2 × 3"])
    assert result.exit_code == 0
    assert "(multiply)" in result.stdout


def test_calc_error_exits_nonzero() -> None:
    result = runner.invoke(app, ["calc", "1 ÷ 0"])
    assert result.exit_code == 1
    assert "Error:" in result.stdout


def test_match_prints_bindings_as_json() -> None:
    pattern = json.dumps({"name": "Sarah", "$rest": {"$var": "deets"}})
    subject = json.dumps({"name": "Sarah", "tel": "555"})
    result = runner.invoke(app, ["match", pattern, subject])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"deets": {"tel": "555"}}


def test_match_rest_token_key() -> None:
    result = runner.invoke(app, ["match", '[{"$var": "first"}, "$rest"]', '["one", "dos", "drie"]'])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"first": "one", "$rest": ["dos", "drie"]}


def test_match_strategy_option() -> None:
    pattern = '["one", {"$var": "second"}, "$rest"]'
    subject = '["badApple", "one", "dos", "drie"]'

    strict = runner.invoke(app, ["match", pattern, subject])
    assert strict.exit_code == 1
    assert "no match" in strict.stdout

    search = runner.invoke(app, ["match", "--strategy", "search", pattern, subject])
    assert search.exit_code == 0
    assert json.loads(search.stdout)["second"] == "dos"


def test_match_invalid_json() -> None:
    result = runner.invoke(app, ["match", "{not json", "1"])
    assert result.exit_code == 2
    assert "Invalid JSON" in result.stdout


def test_match_invalid_pattern() -> None:
    result = runner.invoke(app, ["match", '{"$var": ""}', "1"])
    assert result.exit_code == 2
    assert "Invalid pattern:" in result.stdout
    assert "Invalid variable name" in result.stdout
