"""Command line front end: read a config file, emit C, build it with gcc."""

from __future__ import annotations

import argparse
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from bfcompile.generator import generate
from bfcompile.lexer import Dialect, tokenize
from bfcompile.parser import ParseError, parse

OUTPUT_C_FILE = "output.c"
OUTPUT_DIR = "output"
DEFAULT_PROGRAM_NAME = "Program"

_TRIM_CHARS = " \t\r\n"
_USAGE_DETAILS = (
    "Config file format:\n"
    "  Line 1: Path to .bf file\n"
    "  Line 2: true/false (run after compilation)\n"
    "  Line 3: Output executable name\n"
)


class ConfigError(Exception):
    """Raised when the config file cannot be read or is incomplete."""


@dataclass(frozen=True)
class Config:
    """Settings read from the three-line config file."""

    source_path: Path
    run_after_compile: bool
    program_name: str


def load_config(path: str | Path) -> Config:
    """Read the source path, run flag and executable name from ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ConfigError(f"Could not open config file {path}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    if len(lines) < 3:
        raise ConfigError("Config file is missing required lines.")

    source_path, run_flag, program_name = (line.strip(_TRIM_CHARS) for line in lines[:3])
    return Config(
        source_path=Path(source_path),
        run_after_compile=run_flag.lower() in ("true", "1"),
        program_name=program_name or DEFAULT_PROGRAM_NAME,
    )


def compile_source(source: str, dialect: Dialect = Dialect.V3) -> str:
    """Turn program text into C source; raises ParseError on bad brackets."""
    return generate(parse(tokenize(source, dialect)), dialect)


def _build_target(program_name: str, dialect: Dialect) -> str:
    if dialect is Dialect.V3:
        return program_name
    Path(OUTPUT_DIR).mkdir(parents=True, exist_ok=True)
    return f"{OUTPUT_DIR}/{program_name}"


def _run_gcc(target: str) -> int:
    try:
        return subprocess.run(["gcc", OUTPUT_C_FILE, "-o", target], check=False).returncode
    except OSError:
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the program named by a config file; return the exit status."""
    arg_parser = argparse.ArgumentParser(prog="bfcompile")
    arg_parser.add_argument("config", nargs="?")
    arg_parser.add_argument(
        "--dialect",
        choices=[d.value for d in Dialect],
        default=Dialect.V3.value,
    )
    args = arg_parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.config is None:
        sys.stderr.write(f"Usage: {arg_parser.prog} <config_file.txt>\n{_USAGE_DETAILS}")
        return 1

    dialect = Dialect(args.dialect)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        source = config.source_path.read_text()
    except OSError:
        print(
            f"Error: Could not open Brainfuck source file {config.source_path}",
            file=sys.stderr,
        )
        return 1

    try:
        c_code = compile_source(source, dialect)
    except ParseError as exc:
        print(f"Compilation Failed!\n{exc}", file=sys.stderr)
        return 1

    output_file = Path(OUTPUT_C_FILE)
    try:
        output_file.write_text(c_code)
    except OSError:
        print(f"Error: Could not create output file {OUTPUT_C_FILE}", file=sys.stderr)
        return 1

    target = _build_target(config.program_name, dialect)
    print(f"Compiling {OUTPUT_C_FILE} with gcc...", flush=True)
    result = _run_gcc(target)
    output_file.unlink(missing_ok=True)

    if result != 0:
        print("Error: GCC compilation failed. Make sure gcc is installed.", file=sys.stderr)
        return 1

    executable = f"./{target}"
    print(f"Successfully compiled! You can run it with: {executable}")
    if config.run_after_compile:
        print(f"Running {config.program_name}...", flush=True)
        try:
            subprocess.run([executable], check=False)
        except OSError:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())