import pytest

from rlox.chunk import Chunk, OpKind
from rlox.compiler import Compiler, Parser, Precedence
from rlox.errors import ParsingError
from rlox.value import Value


def compile_source(source, debug=False):
    chunk = Chunk()
    Compiler(source, debug).compile(chunk)
    return chunk


def kinds(chunk):
    return [op.kind for op in chunk.code]


def test_parser_starts_empty():
    parser = Parser()
    assert parser.current is None and parser.previous is None


def test_precedence_ordering():
    chain = [Precedence.NONE]
    step = Precedence.NONE.next()
    while step is not Precedence.ASSIGNMENT or len(chain) == 1:
        chain.append(step)
        step = step.next()
    assert chain == [
        Precedence.NONE,
        Precedence.ASSIGNMENT,
        Precedence.OR,
        Precedence.AND,
        Precedence.EQ,
        Precedence.COMP,
        Precedence.TERM,
        Precedence.FACTOR,
        Precedence.UNARY,
        Precedence.CALL,
        Precedence.PRIMARY,
    ]
    assert chain == sorted(chain)


def test_precedence_next_wraps():
    assert Precedence.TERM.next() is Precedence.FACTOR
    assert Precedence.PRIMARY.next() is Precedence.ASSIGNMENT


def test_single_number():
    chunk = compile_source("42")
    assert kinds(chunk) == [OpKind.CONST]
    assert chunk.constants == [Value(42.0)]
    assert chunk.code[0].const_idx == 0


def test_addition():
    chunk = compile_source("1 + 2")
    assert kinds(chunk) == [OpKind.CONST, OpKind.CONST, OpKind.ADD]
    assert chunk.constants == [Value(1.0), Value(2.0)]


def test_factor_binds_tighter_than_term():
    chunk = compile_source("1 + 2 * 3")
    assert kinds(chunk) == [
        OpKind.CONST,
        OpKind.CONST,
        OpKind.CONST,
        OpKind.MUL,
        OpKind.ADD,
    ]


def test_grouping_overrides_precedence():
    chunk = compile_source("(1 + 2) * 3")
    assert kinds(chunk) == [
        OpKind.CONST,
        OpKind.CONST,
        OpKind.ADD,
        OpKind.CONST,
        OpKind.MUL,
    ]


def test_left_associative_subtraction():
    chunk = compile_source("1 - 2 - 3")
    assert kinds(chunk) == [
        OpKind.CONST,
        OpKind.CONST,
        OpKind.SUB,
        OpKind.CONST,
        OpKind.SUB,
    ]
    assert chunk.constants == [Value(1.0), Value(2.0), Value(3.0)]


def test_division_and_unary_negation():
    chunk = compile_source("-4 / 2")
    assert kinds(chunk) == [OpKind.CONST, OpKind.NEGATE, OpKind.CONST, OpKind.DIV]


def test_negated_grouping():
    chunk = compile_source("-(1 + 2)")
    assert kinds(chunk) == [OpKind.CONST, OpKind.CONST, OpKind.ADD, OpKind.NEGATE]


def test_fractional_number():
    chunk = compile_source("1.5")
    assert chunk.constants == [Value(1.5)]


def test_lines_follow_source():
    chunk = compile_source("1 +\n2")
    assert [op.line for op in chunk.code] == [1, 2, 2]


def test_constant_indices_are_sequential():
    chunk = compile_source("1 + 2 + 3 + 4")
    indices = [op.const_idx for op in chunk.code if op.kind is OpKind.CONST]
    assert indices == list(range(len(chunk.constants)))


def test_empty_source_is_error(capsys):
    with pytest.raises(ParsingError):
        compile_source("")
    assert "[line 1] Error at end: Expected expression" in capsys.readouterr().out


def test_dangling_operator_is_error(capsys):
    with pytest.raises(ParsingError):
        compile_source("1 +")
    assert "Error at end: Expected expression" in capsys.readouterr().out


def test_unclosed_group_is_error(capsys):
    with pytest.raises(ParsingError):
        compile_source("(1")
    assert "Error at end: Expected ')'" in capsys.readouterr().out


def test_trailing_token_is_error(capsys):
    with pytest.raises(ParsingError):
        compile_source("1 2")
    assert "[line 1] Error at '2': Expected end of expression" in capsys.readouterr().out


def test_unexpected_character_is_error(capsys):
    with pytest.raises(ParsingError):
        compile_source("@")
    assert "[line 1] Error: Unexpected character" in capsys.readouterr().out


def test_non_expression_token_reports_lexeme(capsys):
    with pytest.raises(ParsingError):
        compile_source('"a"')
    assert "Error at '\"a\"': Expected expression" in capsys.readouterr().out


def test_debug_mode_traces_emission(capsys):
    chunk = compile_source("1 + 2", debug=True)
    out = capsys.readouterr().out
    assert len(chunk.code) == 3
    assert "Called advance()" in out
    assert out.count("Emitted opcode:") == 3


def test_quiet_mode_has_no_trace(capsys):
    compile_source("1 + 2")
    assert "Emitted opcode:" not in capsys.readouterr().out