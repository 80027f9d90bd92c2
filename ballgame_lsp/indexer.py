from __future__ import annotations

"""
Line-by-line analyzer for Ballgame documents.

Each non-blank line of a document is one expression, the same unit the REPL
evaluates. Evaluation is pure, so every line is read and evaluated to report:
- parse failures with their line/column,
- evaluation errors,
- the rendered result (for hover).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ballgame.interpreter import Interpreter
from ballgame.types.errors import BallgameError, BallgameSyntaxError


@dataclass
class LineReport:
    line: int  # 0-based
    start: int  # 0-based column of the first non-blank char
    end: int
    result: Optional[str] = None
    error: Optional[str] = None
    error_col: Optional[int] = None  # 0-based; set for parse errors only

    @property
    def ok(self) -> bool:
        return self.error is None


def analyze_line(interpreter: Interpreter, line_no: int, line: str) -> Optional[LineReport]:
    code = line.strip()
    if not code:
        return None
    start = len(line) - len(line.lstrip())
    report = LineReport(line=line_no, start=start, end=start + len(code))
    try:
        report.result = interpreter.show(interpreter.eval(code))
    except BallgameSyntaxError as err:
        report.error = str(err)
        # reader columns are 1-based within the stripped line
        report.error_col = start + (err.column or 1) - 1
    except BallgameError as err:
        report.error = str(err)
    return report


def analyze_document(text: str, interpreter: Interpreter | None = None) -> List[LineReport]:
    interpreter = interpreter or Interpreter()
    reports = []
    for line_no, line in enumerate(text.splitlines()):
        report = analyze_line(interpreter, line_no, line)
        if report is not None:
            reports.append(report)
    return reports


def report_at(reports: List[LineReport], line: int) -> Optional[LineReport]:
    for report in reports:
        if report.line == line:
            return report
    return None


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ n1 n2 &rest ns)",
    "-": "(- n1 n2 &rest ns)",
    "*": "(* n1 n2 &rest ns)",
    "/": "(/ n1 n2 &rest ns)",
    "mod": "(mod n1 n2 &rest ns)",
    "quotient": "(quotient n1 n2 &rest ns)",
    "remainder": "(remainder n1 n2 &rest ns)",
    "=": "(= a b)",
    "<": "(< a b)",
    ">": "(> a b)",
    "!=": "(!= a b)",
    ">=": "(>= a b)",
    "<=": "(<= a b)",
    "and": "(and p q)",
    "or": "(or p q)",
    "string=?": "(string=? s1 s2)",
    "string>?": "(string>? s1 s2)",
    "string<?": "(string<? s1 s2)",
    "string<=?": "(string<=? s1 s2)",
    "string>=?": "(string>=? s1 s2)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "cons": "(cons x xs)",
    "eq?": "(eq? a b)",
    "eqv?": "(eqv? a b)",
    "equal?": "(equal? a b)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote expr)",
    "if": "(if pred conseq alt)",
}
