from minicc.errors import UnexpectedToken
from minicc.nodes import (BinaryOperator, BinOp, Function, Num, Program,
                          Return, UnaryOp, UnaryOperator)

UNARY_OPS = {
    'MINUS': UnaryOperator.NEG,
    'TILDE': UnaryOperator.COMPLEMENT,
    'BANG': UnaryOperator.NOT,
}

ADD_OPS = {
    'PLUS': BinaryOperator.ADD,
    'MINUS': BinaryOperator.SUB,
}

MUL_OPS = {
    'MUL': BinaryOperator.MUL,
    'DIV': BinaryOperator.DIV,
}


class Parser:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def consume(self):
        self.pos += 1

    def current_token(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def current_kind(self):
        token = self.current_token()
        return token.kind if token is not None else None

    def expect(self, kind):
        token = self.current_token()
        if token is None or token.kind != kind:
            raise UnexpectedToken(kind, token)
        self.consume()
        return token

    def parse(self):
        print("Parsing")
        program = Program(self.function())
        if self.current_token() is not None:
            raise UnexpectedToken('end of input', self.current_token())
        return program

    def function(self):
        self.expect('INT')
        name = self.expect('ID').value
        self.expect('LPAREN')
        self.expect('RPAREN')
        self.expect('LBRACE')
        body = self.statement()
        self.expect('RBRACE')
        return Function(name, body)

    def statement(self):
        self.expect('RETURN')
        value = self.expr()
        self.expect('SEMI')
        return Return(value)

    def expr(self):
        node = self.term()
        while self.current_kind() in ADD_OPS:
            op = ADD_OPS[self.current_kind()]
            self.consume()
            node = BinOp(node, op, self.term())
        return node

    def term(self):
        node = self.factor()
        while self.current_kind() in MUL_OPS:
            op = MUL_OPS[self.current_kind()]
            self.consume()
            node = BinOp(node, op, self.factor())
        return node

    def factor(self):
        token = self.current_token()
        if token is None:
            raise UnexpectedToken('expression', None)
        if token.kind == 'NUMBER':
            self.consume()
            return Num(token.value)
        elif token.kind in UNARY_OPS:
            self.consume()
            return UnaryOp(UNARY_OPS[token.kind], self.factor())
        elif token.kind == 'LPAREN':
            self.consume()
            node = self.expr()
            self.expect('RPAREN')
            return node
        raise UnexpectedToken('expression', token)
