"""
Command-line front end.

    pymatrix list
    pymatrix run add "[[1, 2], [3, 4]]" "[10, 20]"
    pymatrix run pow "[[1, 2], [3, 4]]" --param exponent=2
    pymatrix new identity 3

Operands, parameters and factory arguments are JSON literals.
"""

from __future__ import annotations

import argparse
import dataclasses
import inspect
import json
import sys
from typing import Any, Callable

from pymatrix import __version__
from pymatrix.core.exceptions import PyMatrixError, ValidationError
from pymatrix.matrix import construction
from pymatrix.matrix._formatting import format_value
from pymatrix.matrix.dense import Matrix
from pymatrix.ops import evaluate, get_operator, list_operators


FACTORIES: dict[str, Callable[..., Matrix]] = {
    'identity': construction.identity,
    'zero': construction.zeros,
    'diagonal': construction.diagonal,
    'with-value': construction.with_value,
    'mesh': construction.mesh,
    'one-hot': construction.one_hot,
    'truth-table': construction.truth_table,
    'create': construction.create,
}


# =============================================================================
# Parsing helpers
# =============================================================================

def _parse_json(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"{what}: not a JSON literal: {text!r} ({e.msg})") from e


def _parse_param(text: str) -> tuple[str, Any]:
    key, sep, raw = text.partition('=')
    if not sep or not key:
        raise ValidationError(f"--param: expected KEY=JSON, got {text!r}")
    return key, _parse_json(raw, f"--param {key}")


# =============================================================================
# Output
# =============================================================================

def _format(value: Any) -> str:
    if isinstance(value, Matrix):
        return str(value).rstrip('\n')
    if isinstance(value, bool) or value is None:
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_value(value)
    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(_format(v) for v in value) + ']'
    if dataclasses.is_dataclass(value):
        lines = []
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            text = _format(item)
            if isinstance(item, Matrix):
                lines.append(f"{f.name}:\n{text}")
            else:
                lines.append(f"{f.name}: {text}")
        return '\n'.join(lines)
    return str(value)


# =============================================================================
# Commands
# =============================================================================

def cmd_list(args: argparse.Namespace) -> int:
    for op in list_operators():
        params = ', '.join(op.parameters)
        line = f"{op.name:<24} {op.alias or '':<18} {op.kind.value:<12} {op.description}"
        if params:
            line += f" [{params}]"
        print(line.rstrip())
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    op = get_operator(args.operator)
    operands = [_parse_json(text, f"operand {i + 1}") for i, text in enumerate(args.operands)]
    params = dict(_parse_param(p) for p in args.param)

    result = evaluate(op, *operands, as_array=args.as_array, **params)

    for message in result.warnings:
        print(f"WARNING: {message}", file=sys.stderr)
    print(_format(result.params))
    if args.timing and result.timing is not None:
        for name, seconds in result.timing.items():
            print(f"{name}: {seconds:.6f}", file=sys.stderr)
    return 0


def cmd_new(args: argparse.Namespace) -> int:
    factory = FACTORIES[args.factory]
    values = [_parse_json(text, f"argument {i + 1}") for i, text in enumerate(args.args)]
    try:
        inspect.signature(factory).bind(*values)
    except TypeError as e:
        raise ValidationError(f"{args.factory}: {e}") from e
    print(_format(factory(*values)))
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pymatrix',
        description='Dense matrix operators with shape inference and broadcasting'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    sub = parser.add_subparsers(dest='command', required=True)

    p_list = sub.add_parser('list', help='List operators')
    p_list.set_defaults(func=cmd_list)

    p_run = sub.add_parser('run', help='Apply an operator to JSON operands')
    p_run.add_argument('operator', help='Operator name or alias (see "list")')
    p_run.add_argument('operands', nargs='+', help='Operands as JSON literals')
    p_run.add_argument(
        '--param', '-p',
        action='append',
        default=[],
        metavar='KEY=JSON',
        help='Keyword parameter for the operator (repeatable)'
    )
    p_run.add_argument(
        '--as-array',
        action='store_true',
        help='Print a matrix result as a column-major list'
    )
    p_run.add_argument(
        '--timing',
        action='store_true',
        help='Print timing sections to stderr'
    )
    p_run.set_defaults(func=cmd_run)

    p_new = sub.add_parser('new', help='Build a matrix with a factory')
    p_new.add_argument('factory', choices=sorted(FACTORIES))
    p_new.add_argument('args', nargs='*', help='Factory arguments as JSON literals')
    p_new.set_defaults(func=cmd_new)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except PyMatrixError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
