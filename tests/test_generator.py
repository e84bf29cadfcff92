import pytest

from asm_interp import evaluate, run_asm
from minicc.generator import AsmGenerator, to_int32
from minicc.main import compile_source, parse_source


def body(code):
    return compile_source(code).splitlines()[2:]


def test_layout():
    assert compile_source("int main() { return 2; }") == (
        ".globl main\n"
        "main:\n"
        "    movl $0, %eax\n"
        "    movl $2, %eax\n"
        "    ret\n"
    )


def test_procedure_named_after_function():
    lines = compile_source("int answer() { return 42; }").splitlines()
    assert lines[:2] == ['.globl answer', 'answer:']


def test_safeguard_comes_first():
    assert body("int main() { return -1; }")[0] == '    movl $0, %eax'


def test_logical_not_sequence():
    assert [line.strip() for line in body("int main() { return !3; }")] == [
        'movl $0, %eax', 'movl $3, %eax', 'cmpl $0, %eax', 'movl $0, %eax', 'sete %al', 'ret',
    ]


def test_binary_operands_go_through_stack():
    assert [line.strip() for line in body("int main() { return 7 - 2; }")] == [
        'movl $0, %eax',
        'movl $7, %eax',
        'pushl %eax',
        'movl $2, %eax',
        'movl %eax, %ecx',
        'popl %eax',
        'subl %ecx, %eax',
        'ret',
    ]


def test_division_sign_extends():
    lines = [line.strip() for line in body("int main() { return 7 / 2; }")]
    assert lines[-3:] == ['cdq', 'idivl %ecx', 'ret']


def test_no_frame_setup():
    asm = compile_source("int main() { return (1 + 2) * 3; }")
    assert '%ebp' not in asm
    assert '%esp' not in asm


def test_output_is_deterministic():
    code = "int main() { return ~(3 - 10) / 2 + !0 * -4; }"
    assert compile_source(code) == compile_source(code)


def test_to_int32():
    assert to_int32(5) == 5
    assert to_int32(2 ** 31) == -2 ** 31
    assert to_int32(2 ** 32 - 1) == -1


def test_generator_does_not_mutate_ast():
    ast = parse_source("int main() { return 1 + 2 * 3; }")
    before = repr(ast)
    AsmGenerator().generate(ast)
    assert repr(ast) == before


@pytest.mark.parametrize("expr, expected", [
    ("2 + 3 * 4", 14),
    ("-5", 251),
    ("(1 + 2) * 3", 9),
    ("!0", 1),
    ("!5", 0),
    ("~0", 255),
    ("10 - 4 - 3", 3),
    ("100 / 10 / 5", 2),
    ("-7 / 2", 253),
    ("7 / -2", 253),
    ("2 * (3 + 4) * 5", 70),
    ("!(1 - 1) + ~-3", 3),
    ("((((42))))", 42),
    ("1 - 2 * 3 + 4 / 2", 253),
])
def test_exit_codes(expr, expected):
    code = f"int main() {{ return {expr}; }}"
    assert run_asm(compile_source(code)) & 0xFF == expected


@pytest.mark.parametrize("expr", [
    "2147483647 + 1",
    "-2147483647 - 1",
    "65536 * 65536",
    "-(2 * 3) / (1 - 3)",
    "~(5 * -3) / 4 - !!9",
    "1000000 * 3000 / 7",
    "-100 / 7 * 7 + 100",
])
def test_matches_reference_semantics(expr):
    code = f"int main() {{ return {expr}; }}"
    assert run_asm(compile_source(code)) == evaluate(parse_source(code).function.body.value)
