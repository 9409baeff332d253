import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from calc.session import Session, loop  # noqa: E402


def log_feature(name: str):
    print(f"[feature] {name}")


def feed(session: Session, lines):
    it = iter(lines)
    out = []

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    loop(session, read, out.append)
    return out


def test_eval_and_persist():
    log_feature("session evaluation")
    s = Session()
    assert s.handle("x = 2") == "=2.000000"
    assert s.handle("x ^ 3") == "=8.000000"


def test_errors_become_messages():
    s = Session()
    assert "ended in operator" in s.handle("1 -")
    assert "reserved" in s.handle("pi = 3")


def test_blank_line_is_ignored():
    assert Session().handle("   ") is None


def test_list_commands():
    log_feature("list / list-pretty")
    s = Session()
    s.handle("a = 1")
    s.handle("b = 2.5")
    assert s.handle("list") == "Values: a=1.000000 b=2.500000"
    assert s.handle("list-pretty") == "Values: a=1.000000\n b=2.500000\n"


def test_clear_resets_bindings():
    log_feature("clear")
    s = Session()
    s.handle("a = 1")
    old = s.env
    assert s.handle("clear") is None
    assert s.env == {}
    assert old == {"a": 1.0}
    assert "undefined variable" in s.handle("a")


def test_show_tree():
    s = Session(show_tree=True)
    assert s.handle("2 ^ 3 ^ 2") == "[[2 ^ 3] ^ 2]\n=64.000000"


def test_loop_stops_on_exit():
    log_feature("exit")
    s = Session()
    out = feed(s, ["y = 4", "exit", "y + 1"])
    assert out == ["=4.000000", "exiting..."]
    assert not s.running


def test_loop_stops_at_end_of_input():
    s = Session()
    out = feed(s, ["1 + 1", "", "list"])
    assert out == ["=2.000000", "Values:"]
    assert s.running


def test_loop_survives_keyboard_interrupt():
    s = Session()
    calls = iter([KeyboardInterrupt, "3 * 3", EOFError])
    out = []

    def read():
        item = next(calls)
        if isinstance(item, type) and issubclass(item, BaseException):
            raise item
        return item

    loop(s, read, out.append)
    assert out == ["=9.000000"]


def test_deep_nesting_is_a_diagnostic():
    log_feature("deeply nested parentheticals")
    s = Session()
    out = s.handle("(" * 400 + "1" + ")" * 400)
    assert out == "expression is nested too deeply"
    assert s.running
    assert s.handle("2 * 3") == "=6.000000"


def test_deep_nesting_does_not_end_loop():
    s = Session()
    out = feed(s, ["(" * 400 + "1" + ")" * 400, "1 + 1"])
    assert out == ["expression is nested too deeply", "=2.000000"]


def test_long_flat_chain():
    s = Session()
    assert s.handle(" + ".join(["1"] * 1500)) == "=1500.000000"
