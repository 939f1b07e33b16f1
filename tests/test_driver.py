from adder.driver import compile_source, main, wrap
from adder.machine import run

ADD1_FIVE = (
    "section .text\n"
    "global our_code_starts_here\n"
    "our_code_starts_here:\n"
    "    mov rax, 5\n"
    "    add rax, 1\n"
    "    ret\n"
)


def test_wrap_empty_body():
    assert wrap([]) == "section .text\nglobal our_code_starts_here\nour_code_starts_here:\n    ret\n"


def test_compile_source():
    assert compile_source("(add1 5)") == ADD1_FIVE
    assert run(compile_source("(negate (sub1 (add1 5)))")) == -5


def test_main_writes_output_file(tmp_path):
    src = tmp_path / "add.snek"
    out = tmp_path / "add.s"
    src.write_text("(add1 5)\n")
    assert main([str(src), str(out)]) == 0
    assert out.read_text() == ADD1_FIVE


def test_main_prints_to_stdout(tmp_path, capsys):
    src = tmp_path / "add.snek"
    src.write_text("(add1 5)")
    assert main([str(src)]) == 0
    assert capsys.readouterr().out == ADD1_FIVE


def test_main_emit_ast_and_body(tmp_path, capsys):
    src = tmp_path / "add.snek"
    src.write_text("(add1 5)")
    assert main(["--emit", "ast", str(src)]) == 0
    assert capsys.readouterr().out == "Increment(operand=Number(value=5))\n"
    assert main(["--emit", "body", str(src)]) == 0
    assert capsys.readouterr().out == "mov rax, 5\nadd rax, 1\n"


def test_main_reports_compile_error(tmp_path, capsys):
    src = tmp_path / "bad.snek"
    out = tmp_path / "bad.s"
    src.write_text("(add1 5 6)\n")
    assert main([str(src), str(out)]) == 1
    err = capsys.readouterr().err
    assert "   1 | (add1 5 6)" in err
    assert "[E002]" in err
    assert not out.exists()


def test_main_reports_out_of_range(tmp_path, capsys):
    src = tmp_path / "big.snek"
    src.write_text("(negate 2147483648)")
    assert main([str(src)]) == 1
    err = capsys.readouterr().err
    assert "^^^^^^^^^^ error: integer literal 2147483648" in err
    assert "[E003]" in err


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "nope.snek")]) == 1
    assert "[E000]" in capsys.readouterr().err
