import io

from asciidraw.chars import render_char_5x7
from asciidraw.cli import FAREWELL, PROMPT, WELCOME, main, run
from asciidraw.shapes import render_arrow, render_square, render_triangle


def _session(text):
    out = io.StringIO()
    status = run(io.StringIO(text), out)
    return status, out.getvalue()


def test_quit_immediately():
    status, output = _session("q\n")
    assert status == 0
    assert output == WELCOME + PROMPT + FAREWELL


def test_end_of_input_terminates():
    status, output = _session("")
    assert status == 0
    assert output == WELCOME + PROMPT


def test_newlines_are_ignored():
    _, output = _session("\n\n\nq\n")
    assert output == WELCOME + PROMPT + FAREWELL


def test_triangle_choice():
    _, output = _session("t\nq\n")
    assert "You selected triangle:\n" + render_triangle(5, 7) in output


def test_square_choice():
    _, output = _session("s\nq\n")
    assert "You selected square:\n" + render_square(5, 5) in output


def test_arrow_choice():
    _, output = _session("a\nq\n")
    assert "You selected arrow:\n" + render_arrow(5, 3, 4) in output


def test_chars_choice_draws_a_b_c():
    _, output = _session("c\nq\n")
    expected = "".join(render_char_5x7(c) for c in "abc")
    assert "You selected chars:\n" + expected in output


def test_unrecognized_option():
    _, output = _session("x\nq\n")
    assert "Unrecognized option 'x', please try again!\n" in output
    assert output.endswith(FAREWELL)


def test_prompt_repeats_per_choice():
    _, output = _session("t\ns\nq\n")
    assert output.count(PROMPT) == 3


def test_characters_on_one_line_are_separate_choices():
    _, output = _session("ts\n")
    assert output.count(PROMPT) == 3
    assert "You selected triangle:" in output
    assert "You selected square:" in output
    assert FAREWELL not in output


def test_input_after_quit_is_not_read():
    _, output = _session("q\nt\n")
    assert "You selected triangle:" not in output
    assert output.endswith(FAREWELL)


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == WELCOME + PROMPT + FAREWELL