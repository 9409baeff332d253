import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from calc import cli, lex_cli  # noqa: E402


def test_one_shot_success(capsys):
    rc = cli.main(["-e", "(2 + 3) * (4 - 1)"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "=15.000000"


def test_one_shot_tree(capsys):
    rc = cli.main(["-e", "2 + 3 * 4", "--tree"])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[2 + [3 * 4]]", "=14.000000"]


def test_one_shot_error(capsys):
    rc = cli.main(["-e", "2 $ 3"])
    assert rc == 1
    out = capsys.readouterr().out
    assert out.startswith("[calc:error]")
    assert "$" in out


def test_one_shot_assignment_echoes_value(capsys):
    assert cli.main(["-e", "x = 7"]) == 0
    assert capsys.readouterr().out.strip() == "=7.000000"


def test_lex_cli_prints_tokens(capsys):
    rc = lex_cli.main(["x = 1"])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("VARIABLE\t'x'\t[0:1)")
    assert lines[-1].startswith("EOF")
    assert len(lines) == 4


def test_lex_cli_flags_invalid_sequence(capsys):
    rc = lex_cli.main(["1 ? 2"])
    assert rc == 1
    assert capsys.readouterr().out.splitlines()[-1].startswith("ERROR\t'?'")


def test_one_shot_deep_nesting(capsys):
    rc = cli.main(["-e", "(" * 400 + "1" + ")" * 400])
    assert rc == 1
    assert "nested too deeply" in capsys.readouterr().out
