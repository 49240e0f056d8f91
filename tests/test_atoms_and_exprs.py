import copy

import pytest

from lisplib.types.atom import Boolean, Instruction, InstructionAtom, Int, Key
from lisplib.types.expr import Application, Constant, Quote


def test_variants_are_distinct():
    assert Int(1) != Boolean(True)
    assert Int(0) != Boolean(False)
    assert Key("t") != Boolean(True)


def test_structural_equality_and_hash():
    assert Int(3) == Int(3)
    assert Key("abc") == Key("abc")
    assert InstructionAtom(Instruction.ADD) == InstructionAtom(Instruction.ADD)
    assert len({Int(1), Int(1), Key("a"), Key("a"), Boolean(True)}) == 3


@pytest.mark.parametrize("value", [True, "1", 1.0])
def test_int_rejects_non_ints(value):
    with pytest.raises(TypeError):
        Int(value)


@pytest.mark.parametrize("value", [2 ** 31, -(2 ** 31) - 1])
def test_int_is_32_bit(value):
    with pytest.raises(ValueError):
        Int(value)


def test_int_bounds():
    assert Int(2 ** 31 - 1).value == 2147483647
    assert Int(-(2 ** 31)).value == -2147483648


def test_boolean_rejects_ints():
    with pytest.raises(TypeError):
        Boolean(1)


def test_atoms_are_immutable():
    with pytest.raises(AttributeError):
        Key("a").name = "b"
    with pytest.raises(AttributeError):
        Int(1).value = 2


def test_atoms_copy():
    assert copy.deepcopy(Key("a")) == Key("a")


def test_instruction_tokens():
    assert Instruction("+") is Instruction.ADD
    assert Instruction("define") is Instruction.DEFINE
    assert [i.token for i in Instruction] == ["+", "-", "*", "/", "=", "not", "define"]


def test_operands_are_normalised_to_tuples():
    head = Constant(InstructionAtom(Instruction.ADD))
    one = Constant(Int(1))
    assert Application(head, [one]) == Application(head, (one,))
    assert Application(head, [one]).operands == (one,)
    assert Quote([one]).exprs == (one,)


def test_exprs_are_hashable():
    expr = Application(Constant(Key("f")), (Constant(Int(1)),))
    assert {expr: 1}[Application(Constant(Key("f")), [Constant(Int(1))])] == 1
