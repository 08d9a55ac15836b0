import math
import random

from pratt_calc.parser import parse
from pratt_calc.runtime import evaluate


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code.replace("^", "**")))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return float(evaluate(parse(code), {}))
    except Exception as e:
        return str(e)


def generate(depth: int) -> str:
    if depth == 0 or random.random() < 0.3:
        return str(random.randint(0, 99))
    left = generate(depth - 1)
    right = generate(depth - 1)
    if random.random() < 0.2:
        left = f"({left})"
    if random.random() < 0.2:
        right = f"({right})"
    return f"{left} {random.choice('+-*/')} {right}"


if __name__ == "__main__":
    while True:
        code = generate(4)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, str) and res_py.endswith("division by zero"):
            continue  # we follow float semantics and return inf/nan instead
        if isinstance(res_py, float) and isinstance(res_my, float):
            # float32 vs float64, cancellation can eat all the precision
            if math.isclose(res_my, res_py, rel_tol=1e-3, abs_tol=1e-2):
                continue
            if math.isinf(res_my) or math.isnan(res_my):
                continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
