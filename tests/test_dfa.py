import pytest

from moc.core import AutomatonError, RunMode
from moc.dfa import DFA

ACCEPT = ["01", "0001", "1101", "010", "0101", "11011"]
REJECT = ["0", "1", "00", "11", "000", "111"]

DELTA = {
    ("q0", "0"): "q1",
    ("q0", "1"): "q0",
    ("q1", "0"): "q1",
    ("q1", "1"): "q2",
    ("q2", "0"): "q2",
    ("q2", "1"): "q2",
}


@pytest.fixture
def dfa():
    return DFA({"q0", "q1", "q2"}, {"0", "1"}, DELTA, "q0", {"q2"})


@pytest.mark.parametrize("word", ACCEPT)
def test_accepts_words_containing_01(dfa, word):
    assert dfa.run(word) is True


@pytest.mark.parametrize("word", REJECT)
def test_rejects_words_without_01(dfa, word):
    assert dfa.run(word) is False


def test_invalid_start_state():
    with pytest.raises(AutomatonError, match="Invalid start state"):
        DFA({"q0"}, {"0"}, {("q0", "0"): "q0"}, "qx", set())


def test_invalid_final_states():
    with pytest.raises(AutomatonError, match="Invalid final states"):
        DFA({"q0"}, {"0"}, {("q0", "0"): "q0"}, "q0", {"qx"})


def test_missing_transition():
    delta = dict(DELTA)
    del delta[("q1", "1")]
    with pytest.raises(AutomatonError, match="Missing transition for state q1 and symbol 1"):
        DFA({"q0", "q1", "q2"}, {"0", "1"}, delta, "q0", {"q2"})


def test_input_steps_and_returns_state(dfa):
    assert dfa.input("0") == "q1"
    assert dfa.current_state == "q1"
    assert dfa.input("1") == "q2"


def test_input_unknown_symbol(dfa):
    with pytest.raises(AutomatonError, match="Symbol 'a' not in alphabet"):
        dfa.input("a")


@pytest.mark.parametrize("word, bad", [("01a", "a"), ("2", "2")])
def test_run_invalid_symbol(dfa, word, bad):
    with pytest.raises(AutomatonError) as info:
        dfa.run(word, RunMode.VERBOSE)
    assert str(info.value) == f"Error processing input '{bad}': Symbol '{bad}' not in alphabet"


def test_run_continues_from_current_state(dfa):
    assert dfa.run("01")
    assert dfa.run("1")
    dfa.reset()
    assert dfa.current_state == dfa.start
    assert not dfa.run("1")


def test_verbose_run_output(dfa, capsys):
    dfa.run("01", RunMode.VERBOSE)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Starting state: q0"
    assert lines[-1] == "Final state: q2 (accepted)"
    assert len(lines) == 4


def test_normal_run_is_silent(dfa, capsys):
    dfa.run("0101")
    assert capsys.readouterr().out == ""


def test_run_multiple(dfa):
    assert dfa.run_multiple(ACCEPT) is True
    assert dfa.run_multiple(ACCEPT + REJECT[:1]) is False
    assert dfa.current_state == "q0"


def test_run_multiple_matches_individual_runs(dfa):
    words = set(ACCEPT) | set(REJECT)
    results = []
    for word in words:
        results.append(dfa.run(word))
        dfa.reset()
    assert dfa.run_multiple(words) == all(results)


def test_run_multiple_summary(dfa, capsys):
    dfa.run_multiple(set(ACCEPT), RunMode.VERBOSE)
    out = capsys.readouterr().out
    assert f"Total strings: {len(ACCEPT)}" in out
    assert f"Accepted: {len(ACCEPT)}" in out
    assert "Rejected: 0" in out


def test_jff_round_trip(dfa, tmp_path):
    path = tmp_path / "output.jff"
    dfa.convert_to_jff(path)
    loaded = DFA.from_jff(path)
    assert loaded.states == dfa.states
    assert loaded.alphabet == dfa.alphabet
    assert loaded.delta == dfa.delta
    assert loaded.start == dfa.start
    assert loaded.finals == dfa.finals
    assert all(loaded.run_multiple([w]) for w in ACCEPT)


def test_jff_output_header(dfa, tmp_path):
    path = tmp_path / "output.jff"
    dfa.convert_to_jff(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
    assert lines[2] == "\t<type>fa</type>"
    assert lines[-1] == "</structure>"


def test_convert_to_unwritable_path(dfa, tmp_path):
    with pytest.raises(AutomatonError, match="Failed to create JFF file"):
        dfa.convert_to_jff(tmp_path)


def test_from_jff_missing_file(tmp_path):
    with pytest.raises(AutomatonError) as info:
        DFA.from_jff(tmp_path / "absent.jff")
    assert str(info.value) == "Failed to create DFA from JFF file: Failed to load JFF file"