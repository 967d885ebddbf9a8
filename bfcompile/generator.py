"""Translate an instruction tree into C source text."""

from __future__ import annotations

from typing import Sequence

from bfcompile.lexer import Dialect, TokenType
from bfcompile.parser import Instruction

_INDENT = "    "
_HEADER_COMMENT = "// Auto-generated Brainfuck to C compiler output\n"

_BASIC_STATEMENTS = {
    TokenType.INCREMENT_POINTER: "ptr++;",
    TokenType.DECREMENT_POINTER: "ptr--;",
    TokenType.INCREMENT_VALUE: "(*ptr)++;",
    TokenType.DECREMENT_VALUE: "(*ptr)--;",
    TokenType.OUTPUT: "putchar(*ptr);",
    TokenType.INPUT: "*ptr = getchar();",
    TokenType.PRINT_POSITION: 'printf("%d", (int)(ptr - tape));',
}
_NUMERIC_STATEMENTS = {
    TokenType.OUTPUT_AS_NUM: 'printf("%d", *ptr);',
    TokenType.INPUT_AS_NUM: 'int temp; scanf("%d", &temp); *ptr = temp;',
}


def _statements_for(dialect: Dialect) -> dict[TokenType, str]:
    if dialect is Dialect.V1:
        return dict(_BASIC_STATEMENTS)
    return {**_BASIC_STATEMENTS, **_NUMERIC_STATEMENTS}


class Generator:
    """Produces a complete C program from parsed instructions.

    Under V1 and V2 the tape lives inside ``main``. Under V3 the tape is
    global and every saved loop (``*[...]``) becomes a function that is
    stored in ``funcTape`` under the current cell's value and run by ``&``.
    """

    def __init__(
        self, program: Sequence[Instruction], dialect: Dialect = Dialect.V3
    ) -> None:
        self.program = list(program)
        self.dialect = dialect
        self._statements = _statements_for(dialect)
        self._functions: list[str] = []
        self._func_counter = 0

    def generate(self) -> str:
        """Return the full C source text for the program."""
        self._functions = []
        self._func_counter = 0
        if self.dialect is Dialect.V3:
            return self._generate_with_functions()
        return self._generate_plain()

    def _generate_plain(self) -> str:
        out = [
            _HEADER_COMMENT,
            "#include <stdio.h>\n",
            "int main() {\n",
            "    char tape[30000] = {0};\n",
            "    char *ptr = tape;\n",
        ]
        self._emit(self.program, out, 1)
        out.append('    printf("\\n");\n')
        out.append("    return 0;\n}\n")
        return "".join(out)

    def _generate_with_functions(self) -> str:
        main_out = ["int main() {\n"]
        self._emit(self.program, main_out, 1)
        main_out.append('    printf("\\n");\n')
        main_out.append("    return 0;\n}\n")

        final_out = [
            _HEADER_COMMENT,
            "#include <stdio.h>\n\n",
            "char tape[30000] = {0};\n",
            "char *ptr = tape;\n\n",
            "typedef void (*LoopFunc)(void);\n",
            "LoopFunc funcTape[256] = {NULL};\n\n",
            *self._functions,
            "\n",
            *main_out,
        ]
        return "".join(final_out)

    def _emit(
        self, instructions: Sequence[Instruction], out: list[str], level: int
    ) -> None:
        indent = _INDENT * level
        for instr in instructions:
            statement = self._statements.get(instr.type)
            if statement is not None:
                out.append(f"{indent}{statement}\n")
            elif instr.type is TokenType.LOOP_START:
                out.append(f"{indent}while (*ptr) {{\n")
                self._emit(instr.body, out, level + 1)
                out.append(f"{indent}}}\n")
            elif self.dialect is Dialect.V3 and instr.type is TokenType.SAVE_LOOP_TRIGGER:
                name = f"saved_loop_{self._func_counter}"
                self._func_counter += 1
                self._functions.append(f"void {name}() {{\n")
                self._emit(instr.body, self._functions, 1)
                self._functions.append("}\n\n")
                out.append(f"{indent}funcTape[(unsigned char)(*ptr)] = {name};\n")
            elif self.dialect is Dialect.V3 and instr.type is TokenType.RUN_LOOP:
                out.append(f"{indent}if (funcTape[(unsigned char)(*ptr)] != NULL) {{\n")
                out.append(f"{indent}    funcTape[(unsigned char)(*ptr)]();\n")
                out.append(f"{indent}}}\n")


def generate(
    program: Sequence[Instruction], dialect: Dialect = Dialect.V3
) -> str:
    """Generate C source for ``program`` under ``dialect``."""
    return Generator(program, dialect).generate()