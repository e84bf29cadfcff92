from ctypes import CFUNCTYPE, c_int32

import llvmlite.binding as llvm
import llvmlite.ir as ir

from minicc.errors import DivisionByZero
from minicc.generator import to_int32
from minicc.nodes import (BinaryOperator, BinOp, Function, Num, Program,
                          Return, UnaryOp, UnaryOperator)

llvm.initialize_native_target()
llvm.initialize_native_asmprinter()

INT32 = ir.IntType(32)


class LLVMCodeGen:
    def __init__(self):
        self.module = None
        self.builder = None
        self.func = None

    def generate_code(self, node):
        if isinstance(node, Num):
            return ir.Constant(INT32, to_int32(node.value))
        elif isinstance(node, UnaryOp):
            operand = self.generate_code(node.operand)
            if node.op == UnaryOperator.NEG:
                return self.builder.neg(operand)
            elif node.op == UnaryOperator.COMPLEMENT:
                return self.builder.not_(operand)
            elif node.op == UnaryOperator.NOT:
                is_zero = self.builder.icmp_signed('==', operand, ir.Constant(INT32, 0))
                return self.builder.zext(is_zero, INT32)
        elif isinstance(node, BinOp):
            left = self.generate_code(node.left)
            right = self.generate_code(node.right)
            if node.op == BinaryOperator.ADD:
                return self.builder.add(left, right)
            elif node.op == BinaryOperator.SUB:
                return self.builder.sub(left, right)
            elif node.op == BinaryOperator.MUL:
                return self.builder.mul(left, right)
            elif node.op == BinaryOperator.DIV:
                # only literal zeros are caught; a divisor that computes to zero is
                # undefined here, and the native program faults on it
                if isinstance(right, ir.Constant) and right.constant == 0:
                    raise DivisionByZero('Division by literal zero')
                return self.builder.sdiv(left, right)
        raise TypeError(f'Cannot generate IR for {node!r}')

    def create_function(self, ast):
        if isinstance(ast, Program):
            ast = ast.function
        if not isinstance(ast, Function) or not isinstance(ast.body, Return):
            raise TypeError(f'Expected a function, got {ast!r}')
        print("Generating LLVM IR")
        self.module = ir.Module(name="module")
        func_type = ir.FunctionType(INT32, [])
        self.func = ir.Function(self.module, func_type, name=ast.name)
        block = self.func.append_basic_block(name="entry")
        self.builder = ir.IRBuilder(block)
        self.builder.ret(self.generate_code(ast.body.value))
        return self.module


def run_jit(module, name):
    """Compile ``module`` in memory and call the zero-argument function ``name``.

    Returns the signed 32-bit value the function produced.
    """
    target = llvm.Target.from_default_triple()
    target_machine = target.create_target_machine()
    mod = llvm.parse_assembly(str(module))
    mod.verify()
    engine = llvm.create_mcjit_compiler(mod, target_machine)
    engine.finalize_object()
    engine.run_static_constructors()
    cfunc = CFUNCTYPE(c_int32)(engine.get_function_address(name))
    return cfunc()


def exit_code(value):
    return value & 0xFF
