import io
import platform
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from libexprc.exceptions import ExprcError
from libexprc.exprc import compile_expression
from libexprc.lexer.errors import UnrecognizedCharacterError
from libexprc.parser.errors import ExpectedSymbolError

PROLOGUE = ".intel_syntax noprefix\n.global main\nmain:\n"
EPILOGUE = "  pop rax\n  ret\n"


def _compile(source: str) -> str:
    fd = io.StringIO()
    compile_expression(source, fd)
    return fd.getvalue()


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("0", 0),
        ("42", 42),
        ("5+20-4", 21),
        (" 12 + 34 - 5 ", 41),
        ("2+3*4", 14),
        ("(2+3)*4", 20),
        ("10-2-3", 5),
        ("7/2", 3),
        ("100/10/5", 2),
        ("2*(3+4)*5", 70),
        ("((1+2)*(3+4))/(2+1)", 7),
        ("1-5", -4),
        ("(1-8)/2", -3),
        ("9223372036854775807+1", -(2**63)),
    ],
)
def test_compile_expression_semantics(source: str, expected: int, evaluate_assembly) -> None:
    assert evaluate_assembly(_compile(source)) == expected


def test_compile_expression_long_chain(evaluate_assembly) -> None:
    source = "+".join(["1"] * 10_000)
    assert evaluate_assembly(_compile(source)) == 10_000


def test_compile_expression_framing_is_identical() -> None:
    for source in ("1", "2+3*4", "(((9)))", "1000000000000"):
        output = _compile(source)
        assert output.startswith(PROLOGUE)
        assert output.endswith(EPILOGUE)


def test_compile_expression_whitespace_invariance() -> None:
    assert _compile("1 + 2") == _compile("1+2") == _compile(" 1  +  2 ")


def test_compile_expression_lex_error_writes_nothing() -> None:
    fd = io.StringIO()
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        compile_expression("1+&2", fd)
    assert fd.getvalue() == ""
    assert exc_info.value.diagnostic.render("1+&2") == "1+&2\n  ^ cannot tokenize\n"


def test_compile_expression_syntax_error_points_at_end_of_input() -> None:
    with pytest.raises(ExpectedSymbolError) as exc_info:
        _compile("(1+2")
    assert exc_info.value.diagnostic.render("(1+2") == (
        "(1+2\n    ^ not the expected symbol ')'\n"
    )


@pytest.mark.parametrize("source", ["", "+", "1+", "(", ")", "1 1", "((1)", "1*/2"])
def test_compile_expression_malformed_inputs(source: str) -> None:
    with pytest.raises(ExprcError) as exc_info:
        _compile(source)
    assert exc_info.value.diagnostic is not None


def test_compile_expression_debug_emit_lexemes(capsys: pytest.CaptureFixture[str]) -> None:
    fd = io.StringIO()
    compile_expression("1+2", fd, debug_emit_lexemes=True)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines()[0].startswith("INTEGER 1")
    assert len(captured.err.splitlines()) == 4


_can_assemble_natively = (
    sys.platform == "linux"
    and platform.machine() in ("x86_64", "AMD64")
    and shutil.which("cc") is not None
)


@pytest.mark.skipif(
    not _can_assemble_natively,
    reason="Requires x86-64 Linux host with C toolchain (`cc`)",
)
@pytest.mark.parametrize(
    ("source", "exit_code"),
    [("2+3*4", 14), ("(2+3)*4", 20), ("10-2-3", 5), ("7/2", 3), ("1-2", 255)],
)
def test_compile_expression_executable_exit_code(
    source: str,
    exit_code: int,
    tmp_path: Path,
) -> None:
    assembly_path = tmp_path / "expr.s"
    executable_path = tmp_path / "expr"
    assembly_path.write_text(_compile(source))

    subprocess.run(
        ["cc", "-o", str(executable_path), str(assembly_path)],
        check=True,
        capture_output=True,
    )
    process = subprocess.run([str(executable_path)], check=False)
    assert process.returncode == exit_code
