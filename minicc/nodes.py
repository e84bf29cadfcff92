from dataclasses import dataclass
from enum import Enum


class UnaryOperator(Enum):
    NEG = '-'
    COMPLEMENT = '~'
    NOT = '!'


class BinaryOperator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'


@dataclass(frozen=True)
class ASTNode:
    pass


@dataclass(frozen=True)
class Num(ASTNode):
    value: int


@dataclass(frozen=True)
class UnaryOp(ASTNode):
    op: UnaryOperator
    operand: ASTNode


@dataclass(frozen=True)
class BinOp(ASTNode):
    left: ASTNode
    op: BinaryOperator
    right: ASTNode


@dataclass(frozen=True)
class Return(ASTNode):
    value: ASTNode


@dataclass(frozen=True)
class Function(ASTNode):
    name: str
    body: Return


@dataclass(frozen=True)
class Program(ASTNode):
    function: Function
