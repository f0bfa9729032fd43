import ast
import math
import operator
import re

from ..core.config import LAUNCHER_CONFIG

_BINARY_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: math.fmod,
    ast.Pow: math.pow,
}

_UNARY_OPS = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

_CONSTANTS = {
    "pi": math.pi,
    "e": math.e,
}

_ALLOWED_CHARS = set("0123456789+-*/%^().eEpPiI")


def is_calculation(query):
    """Decide whether the query looks like arithmetic worth evaluating."""
    config = LAUNCHER_CONFIG["calculator"]
    trimmed = query.strip()

    has_operator = any(op in trimmed for op in config["operators"])
    has_numbers = any(c in "0123456789" for c in trimmed)
    has_letters = any(
        c.isascii() and c.isalpha() and c not in config["allowed_letters"]
        for c in trimmed
    )
    reasonable_length = config["min_length"] <= len(trimmed) <= config["max_length"]

    return has_operator and has_numbers and not has_letters and reasonable_length


def sanitize_expr(expr):
    """Sanitize and fix common calculator expression errors"""
    # Remove spaces
    expr = re.sub(r"\s+", "", expr)
    # Fix double operators
    expr = re.sub(r"\+\+", "+", expr)
    expr = re.sub(r"--", "+", expr)
    expr = re.sub(r"\+\-", "-", expr)
    expr = re.sub(r"-\+", "-", expr)
    # Leading zeros are not valid Python literals
    expr = re.sub(r"(?<![\d.])0+(?=\d)", "", expr)
    # Add * for implicit multiplication
    expr = re.sub(r"(\d)\(", r"\1*(", expr)
    expr = re.sub(r"\)(\d)", r")*\1", expr)
    expr = re.sub(r"\)\(", r")*(", expr)
    expr = re.sub(r"(\d)(pi)\b", r"\1*\2", expr, flags=re.IGNORECASE)  # e.g., 2pi -> 2*pi
    # 2e -> 2*e, but leave exponent literals like 1e5 and 2e-3 alone
    expr = re.sub(r"(\d)(e)(?![\w+-])", r"\1*\2", expr, flags=re.IGNORECASE)
    return expr


def _eval_node(node):
    if isinstance(node, ast.Expression):
        return _eval_node(node.body)
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise SyntaxError(f"Unsupported literal {node.value!r}")
        return float(node.value)
    if isinstance(node, ast.Name):
        try:
            return _CONSTANTS[node.id.lower()]
        except KeyError:
            raise NameError(node.id) from None
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPS:
        return _BINARY_OPS[type(node.op)](_eval_node(node.left), _eval_node(node.right))
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        return _UNARY_OPS[type(node.op)](_eval_node(node.operand))
    raise SyntaxError(f"Unsupported expression {type(node).__name__}")


def format_number(value):
    """Render a result: integral values without a decimal point."""
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def evaluate_calculator(expr):
    """Evaluate calculator expression with proper error handling"""
    if not expr.strip():
        return None, "Empty expression"

    if len(expr) > 100:
        return None, "Expression too long"

    expr = sanitize_expr(expr)

    # Only numbers, operators, parentheses and the pi/e constants
    if not all(c in _ALLOWED_CHARS for c in expr):
        return None, "Invalid characters in expression"
    if "**" in expr:
        return None, "Use ^ for powers"

    try:
        tree = ast.parse(expr.replace("^", "**"), mode="eval")
        result = _eval_node(tree)
    except SyntaxError:
        return None, "Invalid syntax"
    except NameError:
        return None, "Unknown constant"
    except ZeroDivisionError:
        return None, "Division by zero"
    except OverflowError:
        return None, "Result too large"
    except ValueError as e:
        if "math domain" in str(e):
            return None, "Math domain error"
        return None, f"Value error: {e}"
    except RecursionError:
        return None, "Expression too deeply nested"

    if not math.isfinite(result):
        return None, "Result too large"
    return format_number(result), None
