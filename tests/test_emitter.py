import io

from tttgen.emitter import Emitter


def test_lines_are_appended_in_order_with_indentation():
    buf = io.StringIO()
    em = Emitter(buf)
    em.line("while True:")
    with em.indented():
        em.line("r, c = get_input()")
        with em.indented():
            em.line("break")
        em.line()
    em.line("done")
    assert buf.getvalue() == "while True:\n    r, c = get_input()\n        break\n\ndone\n"
    assert em.lines_written == 5
    assert em.level == 0


def test_raw_counts_lines_and_level_restored_on_error():
    buf = io.StringIO()
    em = Emitter(buf, indent_unit="  ")
    em.raw("a\nb\n")
    try:
        with em.indented():
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert em.level == 0
    assert em.lines_written == 2
    em.line("x")
    assert buf.getvalue() == "a\nb\nx\n"
