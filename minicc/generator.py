from minicc.nodes import (BinaryOperator, BinOp, Function, Num, Program,
                          Return, UnaryOp, UnaryOperator)

INDENT = '    '

UNARY_ASM = {
    UnaryOperator.NEG: ['negl %eax'],
    UnaryOperator.COMPLEMENT: ['notl %eax'],
    UnaryOperator.NOT: ['cmpl $0, %eax', 'movl $0, %eax', 'sete %al'],
}

# right operand sits in %ecx, left in %eax
BINARY_ASM = {
    BinaryOperator.ADD: ['addl %ecx, %eax'],
    BinaryOperator.SUB: ['subl %ecx, %eax'],
    BinaryOperator.MUL: ['imull %ecx, %eax'],
    BinaryOperator.DIV: ['cdq', 'idivl %ecx'],
}


def to_int32(value):
    """Wrap an integer into the signed 32-bit range."""
    return (value + 2 ** 31) % 2 ** 32 - 2 ** 31


class AsmGenerator:
    """Emits AT&T-syntax 32-bit assembly for a parsed program.

    Every expression leaves its value in %eax. Binary nodes park the left
    operand on the stack while the right one is computed, then move the right
    operand into %ecx and pop the left one back before combining them.
    """

    def generate(self, program):
        print("Generating assembly")
        return '\n'.join(self.generate_code(program)) + '\n'

    def generate_code(self, node):
        if isinstance(node, Program):
            return self.generate_code(node.function)
        elif isinstance(node, Function):
            lines = [f'.globl {node.name}', f'{node.name}:']
            body = ['movl $0, %eax'] + self.generate_code(node.body) + ['ret']
            return lines + [INDENT + instr for instr in body]
        elif isinstance(node, Return):
            return self.generate_code(node.value)
        elif isinstance(node, Num):
            return [f'movl ${to_int32(node.value)}, %eax']
        elif isinstance(node, UnaryOp):
            return self.generate_code(node.operand) + UNARY_ASM[node.op]
        elif isinstance(node, BinOp):
            return (self.generate_code(node.left)
                    + ['pushl %eax']
                    + self.generate_code(node.right)
                    + ['movl %eax, %ecx', 'popl %eax']
                    + BINARY_ASM[node.op])
        raise TypeError(f'Cannot generate code for {node!r}')
