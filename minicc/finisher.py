import os
import subprocess


def output_path(source_path, extension):
    """Path next to ``source_path`` with its extension replaced (or dropped)."""
    return os.path.splitext(source_path)[0] + extension


def write_output(path, text):
    print(f"Writing {path}")
    with open(path, "w") as f:
        f.write(text)


def assemble_and_link(asm_path, exe_path, cc="gcc"):
    print(f"Assembling and linking {asm_path} into {exe_path}")
    subprocess.run([cc, "-m32", asm_path, "-o", exe_path], check=True)
    return exe_path
