class CompileError(RuntimeError):
    pass


class SourceFileError(CompileError):
    pass


class UnrecognizedFragment(CompileError):
    def __init__(self, text, line, column):
        self.text = text
        self.line = line
        self.column = column
        super().__init__(f'Unrecognized fragment {text!r} at {line}:{column}')


class UnexpectedToken(CompileError):
    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        if found is None:
            msg = f'Expected {expected}, got end of input'
        else:
            msg = f'Expected {expected}, got {found.kind} {found.value!r} at {found.line}:{found.column}'
        super().__init__(msg)


class DivisionByZero(CompileError):
    pass
