"""Line-oriented read-eval-print loop."""

from __future__ import annotations

from typing import Callable

from ballgame.config import get_prompt, get_quit_command
from ballgame.interpreter import Interpreter


def read_prompt(prompt: str) -> str:
    return input(prompt)


def run_repl(
    interpreter: Interpreter,
    read_line: Callable[[str], str] = read_prompt,
    write_line: Callable[[str], None] = print,
    prompt: str | None = None,
    quit_command: str | None = None,
) -> None:
    """Evaluate one line at a time until the quit command or end of input."""
    prompt = get_prompt() if prompt is None else prompt
    quit_command = get_quit_command() if quit_command is None else quit_command
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            break
        if line == quit_command:
            break
        write_line(interpreter.eval_string(line))
