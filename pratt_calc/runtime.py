from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from pratt_calc.parser import Atom, Expression, Operation, parse
from pratt_calc.utils import logger
from pratt_calc.value import Number, parse_number


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Runtime error: {self.errmsg}"


class UndefinedVariableError(CalcRuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable {name}")
        self.name = name


class BadOperatorError(CalcRuntimeError):
    def __init__(self, operator: str) -> None:
        super().__init__(f"Bad operator: {operator}")
        self.operator = operator


BinaryOperationImpl = Callable[[Number, Number], Number]

# must cover every operator in parser.BINDING_POWERS except "=" and "."
OPERATION_IMPLS: dict[str, BinaryOperationImpl] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "^": lambda a, b: a**b,
    "√": lambda a, b: a ** (Number(1.0) / b),
}


def is_assignment(expression: Expression) -> Optional[tuple[str, Expression]]:
    if not isinstance(expression, Operation) or expression.operator != "=":
        return None
    if not isinstance(expression.left, Atom):
        raise CalcRuntimeError(f"Assigning only works for variables, got {expression.left}")
    return expression.left.text, expression.right


def evaluate(expression: Expression, variables: dict[str, Number]) -> Number:
    """Evaluates the tree against the variables without modifying them.

    "=" is not an operation here: callers handle assignment with is_assignment() first,
    evaluating an assignment tree directly looks up its target as a variable instead.
    """
    if isinstance(expression, Atom):
        number = parse_number(expression.text)
        if number is not None:
            return number
        elif expression.text in variables:
            return variables[expression.text]
        else:
            raise UndefinedVariableError(expression.text)
    elif isinstance(expression, Operation):
        left_res = evaluate(expression.left, variables)
        right_res = evaluate(expression.right, variables)
        impl = OPERATION_IMPLS.get(expression.operator)
        if impl is None:
            raise BadOperatorError(expression.operator)
        with np.errstate(all="ignore"):
            return Number(impl(left_res, right_res))
    else:
        raise CalcRuntimeError(f"Unexpected expression type: {expression!r}")


def run_line(code: str, variables: dict[str, Number]) -> Optional[Number]:
    """Returns the value of the line, or None if the line was an assignment"""
    expression = parse(code)
    assignment = is_assignment(expression)
    if assignment is not None:
        name, value_expression = assignment
        value = evaluate(value_expression, variables)
        variables[name] = value
        logger.debug("Assigned %s = %s", name, value)
        return None
    return evaluate(expression, variables)
