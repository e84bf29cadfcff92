import argparse
import sys

from minicc import __version__
from minicc.errors import CompileError
from minicc.finisher import assemble_and_link, output_path, write_output
from minicc.generator import AsmGenerator
from minicc.irgen import LLVMCodeGen, exit_code, run_jit
from minicc.lexer import tokenize
from minicc.parser import Parser
from minicc.reader import fetch_code


def parse_source(code):
    return Parser(tokenize(code)).parse()


def compile_source(code):
    return AsmGenerator().generate(parse_source(code))


def compile_file(filename, link=True, emit_llvm=False, jit=False, cc="gcc"):
    # every stage runs before anything is written
    ast = parse_source(fetch_code(filename))
    asm = AsmGenerator().generate(ast)
    module = None
    if emit_llvm or jit:
        module = LLVMCodeGen().create_function(ast)

    asm_path = output_path(filename, ".s")
    write_output(asm_path, asm)
    if emit_llvm:
        write_output(output_path(filename, ".ll"), str(module))
    if jit:
        print(f"Exit code: {exit_code(run_jit(module, ast.function.name))}")
    if link:
        assemble_and_link(asm_path, output_path(filename, ""), cc=cc)
    return asm_path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="minicc", description="Compile a single-return C function to 32-bit assembly")
    parser.add_argument("source", help="C source file to compile")
    parser.add_argument("-S", dest="link", action="store_false",
                        help="Only write the assembly file, do not assemble and link")
    parser.add_argument("--emit-llvm", action="store_true", help="Also write the LLVM IR next to the source")
    parser.add_argument("--run-jit", action="store_true",
                        help="Evaluate the program with the LLVM JIT and print its exit code")
    parser.add_argument("--cc", default="gcc", help="Assembler/linker driver (default: gcc)")
    parser.add_argument("--version", action="version", version=f"minicc {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        compile_file(args.source, link=args.link, emit_llvm=args.emit_llvm,
                     jit=args.run_jit, cc=args.cc)
    except CompileError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
