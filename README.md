# bfcompile

`bfcompile` turns Brainfuck programs into C source and, through `gcc`,
into native executables.

## Dialects

Three dialects are available (`bfcompile.lexer.Dialect`). Every dialect
knows the eight classic commands (`> < + - . , [ ]`). The extra commands
are:

| Command  | Meaning                                               | Dialects   |
|----------|-------------------------------------------------------|------------|
| `?`      | print the current tape position as a number           | v1, v2, v3 |
| `'`      | print the current cell as a number                    | v2, v3     |
| `"`      | read a number into the current cell                   | v2, v3     |
| `*[...]` | save the loop body as a function, keyed by the cell   | v3         |
| `&`      | run the function saved under the current cell value   | v3         |

Any character a dialect does not know is a comment. The default dialect is
`v3`. The generated program has a tape of 30000 cells and prints a newline
when it finishes. Under `v3` the tape is global and each saved loop becomes
a C function named `saved_loop_N`, stored in a 256-entry table indexed by
the current cell's value.

## Installing

```
pip install .
```

Building executables needs `gcc` on your `PATH`.

## Command line

`bfcompile` takes a configuration file of three lines:

```
hello.bf
true
hello
```

1. the path of the Brainfuck source file;
2. `true` or `1` (in any case) to run the program once it is built,
   anything else to only build it;
3. the name of the executable to produce (`Program` if left empty).

Surrounding spaces, tabs and carriage returns on each line are ignored.
Then run:

```
bfcompile build.txt
bfcompile build.txt --dialect v2
```

`--dialect` takes `v1`, `v2` or `v3` (default `v3`).

The source is checked for unmatched brackets and, under `v3`, for a `*`
not followed by `[`; such errors are printed as
`Syntax Error: ... at line L, column C` and the command exits with
status 1. Otherwise the C code is written to `output.c` in the current
directory and compiled with `gcc`; `output.c` is removed afterwards,
whether or not `gcc` succeeded. Under `v3` the executable is written to
the current directory; under `v1` and `v2` it goes into an `output/`
directory, which is created if needed. The exit status is 0 on success
and 1 on any error (missing arguments, unreadable or incomplete config
file, unreadable source, syntax error, failed `gcc` run).

The same command is available as `python -m bfcompile.cli`.

## Library use

Each stage is available on its own:

```python
from bfcompile.lexer import Dialect, tokenize
from bfcompile.parser import ParseError, parse
from bfcompile.generator import generate

source = "++++++++[>++++++<-]>'"
dialect = Dialect.V2

tokens = tokenize(source, dialect)    # list of Token(type, line, column)
try:
    program = parse(tokens)           # list of Instruction(type, body)
except ParseError as error:
    print(error, error.line, error.column)
else:
    c_code = generate(program, dialect)
```

`tokenize` always ends its list with an `END_OF_FILE` token. The classes
`Lexer`, `Parser` and `Generator` do the same work as these functions.
`ParseError` is a `ValueError`.

`bfcompile.cli.compile_source(source, dialect)` runs lexing, parsing and
generation in one call, and `bfcompile.cli.load_config(path)` reads a
configuration file into a `Config` (`source_path`, `run_after_compile`,
`program_name`), raising `ConfigError` when it cannot be read or has
fewer than three lines.

## What it does not do

`bfcompile` does not run Brainfuck programs itself: there is no
interpreter. It only produces C source, and it depends on an installed
`gcc` to turn that into something that can run.

## Tests

```
pip install .[test]
pytest
```