from pratt_calc.parser import ParserError, parse_tokens
from pratt_calc.runtime import CalcRuntimeError, evaluate, is_assignment
from pratt_calc.tokenizer import tokenize
from pratt_calc.value import Number, format_number

variables: dict[str, Number] = dict()

for code in [
    "5",
    "1 + 1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "1 - 2 - 3",
    "7/6/2000",
    "2^3^2",
    "8√3",
    "foo = (1 + 14 * (54^2))",
    "foo / 2",
    "a = b = 10",
    "3.5",
    "1 2 + 3",
    "-1",
    "(1 + 2",
    "1 % 2",
    "undefined + 1",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    tokens = tokenize(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse_tokens(tokens)
    except ParserError as e:
        print(e)
        continue
    print(f"ast: {expression}")

    try:
        assignment = is_assignment(expression)
        if assignment is not None:
            name, value_expression = assignment
            variables[name] = evaluate(value_expression, variables)
            print(f"assigned: {name} = {format_number(variables[name])}")
        else:
            print(f"result: {format_number(evaluate(expression, variables))}")
    except CalcRuntimeError as e:
        print(e)
    print(f"variables: {variables}")
