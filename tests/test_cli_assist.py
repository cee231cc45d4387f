from apps.cli.assist import handle_line
from wordle_entropy.session import Session, SessionState


def test_suggest_and_record(tiny_dicts):
    s = Session(tiny_dicts)
    out = handle_line(s, "", top_n=2)
    assert out.splitlines()[0].split()[:3] == ["1.", "crane", "*"]
    out = handle_line(s, "crane --g-g")
    assert "1 candidate" in out
    assert handle_line(s, "c") == "slate"
    assert s.state is SessionState.IN_PROGRESS


def test_constraints_reset_and_usage(tiny_dicts):
    s = Session(tiny_dicts)
    handle_line(s, "crane --g-g")
    assert handle_line(s, "k").startswith("_ _ a _ e")
    assert handle_line(s, "r") == "reset"
    assert s.state is SessionState.FRESH
    assert handle_line(s, "too many words here").startswith("expected")


def test_solved_status(tiny_dicts):
    s = Session(tiny_dicts)
    assert "solved: crane" in handle_line(s, "crane GGGGG")


def test_commands_are_case_insensitive(tiny_dicts):
    s = Session(tiny_dicts)
    assert handle_line(s, "S", top_n=1).split()[1] == "crane"
    assert handle_line(s, "Suggest", top_n=1).split()[1] == "crane"
    handle_line(s, "CRANE --G-G")
    assert handle_line(s, "C") == "slate"
