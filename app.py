from flask import Flask, redirect, render_template_string, request, url_for
from sympy import nextprime
import ast
import logging
import operator
import os

import numtheory
from pages import (
    ERROR_TEMPLATE,
    EUCLIDEAN_TEMPLATE,
    FACTORIZATION_TEMPLATE,
    INDEX_TEMPLATE,
    RESIDUE_TEMPLATE,
    WORST_CASE_TEMPLATE,
)

logger = logging.getLogger(__name__)

# --- Expression input ---

# map AST operators to Python functions
_binops = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.floordiv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow
}
_unops = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg
}

MAX_EXPONENT = 4096
MAX_RESULT_BITS = 1 << 16


class InputRejected(ValueError):
    """User input that is malformed, negative or above a configured bound."""


def parse_int_expr(expr: str) -> int:
    """
    Safely parse and evaluate an integer expression supporting:
      - integers
      - +, -, *, //, %, ** and parentheses
      - / as floor division
      - caret (^) as exponent shorthand
    """
    expr = expr.strip()
    if not expr:
        raise InputRejected("Input cannot be empty.")
    # replace caret with Python exponent operator
    expr = expr.replace('^', '**')
    try:
        node = ast.parse(expr, mode='eval')
    except SyntaxError:
        raise InputRejected(f"Cannot parse {expr!r}") from None

    def _evaluate(node):
        if isinstance(node, ast.Expression):
            return _evaluate(node.body)

        if isinstance(node, ast.Constant):
            if isinstance(node.value, int) and not isinstance(node.value, bool):
                return _check_size(node.value)
            raise InputRejected(f"Non-integer literal {node.value!r}")

        if isinstance(node, ast.BinOp):
            op_type = type(node.op)
            if op_type not in _binops:
                raise InputRejected(f"Operator {op_type.__name__} not supported")
            left = _evaluate(node.left)
            right = _evaluate(node.right)
            if op_type is ast.Pow and not 0 <= right <= MAX_EXPONENT:
                raise InputRejected(f"Exponent must be between 0 and {MAX_EXPONENT}")
            if op_type is ast.Pow and abs(left).bit_length() * right > MAX_RESULT_BITS:
                raise InputRejected("Result of the power is too large")
            if op_type is ast.Mult and left.bit_length() + right.bit_length() > MAX_RESULT_BITS:
                raise InputRejected("Result of the product is too large")
            if op_type in (ast.Div, ast.FloorDiv, ast.Mod) and right == 0:
                raise InputRejected("Division by zero")
            return _check_size(_binops[op_type](left, right))

        if isinstance(node, ast.UnaryOp):
            op_type = type(node.op)
            if op_type not in _unops:
                raise InputRejected(f"Unary op {op_type.__name__} not supported")
            operand = _evaluate(node.operand)
            return _check_size(_unops[op_type](operand))

        raise InputRejected(f"Unsupported expression {type(node).__name__}")

    return _evaluate(node)


def _check_size(value: int) -> int:
    if value.bit_length() > MAX_RESULT_BITS:
        raise InputRejected(f"Numbers are limited to {MAX_RESULT_BITS} bits")
    return value


def _describe(value: int) -> str:
    # ints past a few thousand digits cannot be turned into str on newer interpreters
    if value.bit_length() > 64:
        return f"a {value.bit_length()}-bit number"
    return str(value)


def check_bound(value: int, limit: int, what: str) -> int:
    if value < 0:
        raise InputRejected(f"{what} must not be negative, got {_describe(value)}")
    if value > limit:
        raise InputRejected(f"{what} must be at most {_describe(limit)}, got {_describe(value)}")
    return value


def _query_int(name: str) -> int:
    return parse_int_expr(request.args.get(name, ''))


# --- Flask Application ---

DEFAULT_CONFIG = {
    "MAX_SCAN_BOUND": 1000,
    "MAX_MODULUS": 60,
    "MAX_FACTOR_INPUT": 10**12,
    "MAX_GCD_INPUT": 10**30,
    "HOST": "0.0.0.0",
    "PORT": 8080,
}


def _config_from_env():
    config = dict(DEFAULT_CONFIG)
    for key, default in DEFAULT_CONFIG.items():
        raw = os.environ.get(f"NUMTHEORY_{key}")
        if raw is not None:
            config[key] = type(default)(raw)
    return config


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_mapping(_config_from_env())
    if config:
        app.config.from_mapping(config)

    @app.errorhandler(InputRejected)
    def input_rejected(e):
        logger.info("rejected input on %s: %s", request.path, e)
        return render_template_string(ERROR_TEMPLATE, title="Invalid input", message=str(e)), 400

    @app.route('/', methods=['GET', 'POST'])
    def index():
        result_text = ''
        last_input = ''
        if request.method == 'POST':
            expression = request.form.get('number', '')
            last_input = expression
            try:
                n = check_bound(parse_int_expr(expression), app.config["MAX_FACTOR_INPUT"], "Number")
                if numtheory.is_prime(n):
                    result_text = f"{n} is prime. The next prime is {nextprime(n)}."
                else:
                    result_text = f"{n} is not prime. The next prime is {nextprime(n)}."
            except InputRejected as e:
                result_text = f"Error: {e}"

        return render_template_string(
            INDEX_TEMPLATE,
            title="Number Theory Explorer",
            result=result_text,
            last_input=last_input,
            max_scan_bound=app.config["MAX_SCAN_BOUND"],
            max_modulus=app.config["MAX_MODULUS"],
        )

    @app.route('/euclidian_algorithm/<int:a>/<int:b>')
    def euclidean_algorithm(a, b):
        limit = app.config["MAX_GCD_INPUT"]
        check_bound(a, limit, "a")
        check_bound(b, limit, "b")
        gcd, steps = numtheory.traced_gcd(a, b)
        return render_template_string(
            EUCLIDEAN_TEMPLATE, title="Euclidean Algorithm", a=a, b=b, gcd=gcd, steps=steps,
        )

    @app.route('/euclidian_algorithm')
    def euclidean_form():
        a, b = _query_int('a'), _query_int('b')
        limit = app.config["MAX_GCD_INPUT"]
        check_bound(a, limit, "a")
        check_bound(b, limit, "b")
        return redirect(url_for('euclidean_algorithm', a=a, b=b))

    @app.route('/euclidian_algorithm_worst_case/<int:upper>')
    def worst_case(upper):
        check_bound(upper, app.config["MAX_SCAN_BOUND"], "Upper bound")
        result = numtheory.scan_worst_case(upper)
        logger.info(
            "worst-case scan below %d took %.1f ms (%d steps at %s)",
            upper, result.elapsed_ms, result.max_steps, result.best_pair,
        )
        return render_template_string(
            WORST_CASE_TEMPLATE, title="Euclidean Algorithm: Worst Case", result=result,
        )

    @app.route('/euclidian_algorithm_worst_case')
    def worst_case_form():
        upper = check_bound(_query_int('upper'), app.config["MAX_SCAN_BOUND"], "Upper bound")
        return redirect(url_for('worst_case', upper=upper))

    @app.route('/integer_factorization/<int:number>')
    def integer_factorization(number):
        check_bound(number, app.config["MAX_FACTOR_INPUT"], "Number")
        groups = numtheory.prime_factors(number)
        return render_template_string(
            FACTORIZATION_TEMPLATE,
            title="Integer Factorization",
            number=number,
            factors=numtheory.flatten_factors(groups),
            groups=groups,
        )

    @app.route('/integer_factorization')
    def factorization_form():
        number = check_bound(_query_int('number'), app.config["MAX_FACTOR_INPUT"], "Number")
        return redirect(url_for('integer_factorization', number=number))

    @app.route('/residue_class/<int:modulus>')
    def residue_class(modulus):
        check_bound(modulus, app.config["MAX_MODULUS"], "Modulus")
        if modulus < 1:
            raise InputRejected("Modulus must be at least 1")
        table = numtheory.build_residue_tables(modulus)
        ops = [
            (numtheory.ResidueOp.ADD, table.addition_table),
            (numtheory.ResidueOp.MULTIPLY, table.multiplication_table),
        ]
        return render_template_string(RESIDUE_TEMPLATE, title="Residue Classes", table=table, ops=ops)

    @app.route('/residue_class')
    def residue_form():
        modulus = check_bound(_query_int('modulus'), app.config["MAX_MODULUS"], "Modulus")
        if modulus < 1:
            raise InputRejected("Modulus must be at least 1")
        return redirect(url_for('residue_class', modulus=modulus))

    return app


app = create_app()


def main():
    from waitress import serve
    logging.basicConfig(
        level=os.environ.get("NUMTHEORY_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host, port = app.config["HOST"], app.config["PORT"]
    logger.info("serving on http://%s:%s", host, port)
    serve(app, host=host, port=port)


if __name__ == '__main__':
    main()
