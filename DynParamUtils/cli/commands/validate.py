#!/usr/bin/env python3
"""
commands/validate.py

Check a submitted value against a parameter's current choices.

Examples:
  dynparam validate -c job.yaml -p TARGETS --value "b,c"
"""

import sys

from DynParamUtils.cli.args import add_job_file_arg, add_parameter_arg
from DynParamUtils.cli.job_utils import load_job_from_args
from DynParamUtils.exceptions import InvalidChoiceError
from DynParamUtils.parameters import ParameterValue


def register(subparsers):
    p = subparsers.add_parser(
        'validate',
        help='Validate a submitted parameter value',
        description='Accept or reject a value (comma-separated for multi-select).',
    )
    add_job_file_arg(p)
    add_parameter_arg(p)
    p.add_argument('--value', required=True, help='Submitted value')
    p.set_defaults(func=do_validate)


def do_validate(args):
    definition = load_job_from_args(args).get(args.parameter)
    try:
        definition.check_parameter_value(ParameterValue(definition.name, args.value))
    except InvalidChoiceError as exc:
        print(f"REJECTED: {exc}", file=sys.stderr)
        return 2
    print(f"OK: {definition.name}={args.value}")
    return 0
