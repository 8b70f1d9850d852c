import pytest

from advent2021.alu import (
    AluState,
    Instruction,
    Operation,
    compile_program,
    is_valid_model_number,
    run,
)

BINARY = [
    "inp w",
    "add z w",
    "mod z 2",
    "div w 2",
    "add y w",
    "mod y 2",
    "div w 2",
    "add x w",
    "mod x 2",
    "div w 2",
    "mod w 2",
]


def test_compile_literal_and_register_operands():
    program = compile_program(["inp w", "add x -3", "mul y z"])
    assert program == [
        Instruction(Operation.INP, "w", None),
        Instruction(Operation.ADD, "x", -3),
        Instruction(Operation.MUL, "y", "z"),
    ]


def test_compile_skips_blank_lines():
    assert compile_program(["", "inp x", "  "]) == [Instruction(Operation.INP, "x")]


def test_negate_program():
    state = run(compile_program(["inp x", "mul x -1"]), "7")
    assert state.x == -7


def test_three_times_comparison():
    program = compile_program(["inp z", "inp x", "mul z 3", "eql z x"])
    assert run(program, "39").z == 1
    assert run(program, "38").z == 0


def test_binary_decomposition():
    state = run(compile_program(BINARY), "9")
    assert (state.w, state.x, state.y, state.z) == (1, 0, 0, 1)


def test_division_truncates_toward_zero():
    state = run(compile_program(["inp x", "mul x -1", "div x 2"]), "7")
    assert state.x == int(-7 / 2)


def test_modulo_keeps_dividend_sign():
    state = run(compile_program(["inp x", "mul x -1", "mod x 4"]), "7")
    assert state.x < 0
    assert state.x == -(7 % 4)


def test_run_accepts_int_digits_and_tracks_position():
    state = run(compile_program(["inp w", "inp x"]), 45)
    assert (state.w, state.x, state.position) == (4, 5, 2)


def test_apply_does_not_mutate_state():
    start = AluState()
    after = Instruction(Operation.ADD, "y", 4).apply(start)
    assert start.y == 0
    assert after.y == 4


def test_is_valid_model_number():
    program = compile_program(["inp z", "add z -5"])
    assert is_valid_model_number(program, "5") is True
    assert is_valid_model_number(program, "6") is False


def test_unparseable_line_raises():
    with pytest.raises(ValueError):
        compile_program(["add"])


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        compile_program(["jmp x 1"])


def test_invalid_target_raises():
    with pytest.raises(ValueError):
        compile_program(["add 3 x"])


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        compile_program(["add x"])


def test_running_out_of_input_raises():
    with pytest.raises(ValueError):
        run(compile_program(["inp x", "inp y"]), "1")


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        run(compile_program(["inp x", "div x y"]), "3")


def test_modulo_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        run(compile_program(["inp x", "mod x 0"]), "3")


def test_unknown_register_lookup_raises():
    with pytest.raises(ValueError):
        AluState().register("q")