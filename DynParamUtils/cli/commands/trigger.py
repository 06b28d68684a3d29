#!/usr/bin/env python3
"""
commands/trigger.py

Resolve every parameter of a job the way a build trigger would: submitted
values are validated, missing ones fall back to their defaults.

Examples:
  dynparam trigger -c job.yaml
  dynparam trigger -c job.yaml BRANCH=main TARGETS=a,b
"""

import sys

from DynParamUtils.cli.args import add_job_file_arg
from DynParamUtils.cli.job_utils import load_job_from_args, parse_assignments


def register(subparsers):
    p = subparsers.add_parser(
        'trigger',
        help='Resolve all parameter values for a build',
        description='Validate submitted NAME=VALUE pairs and fill in defaults.',
    )
    add_job_file_arg(p)
    p.add_argument('values', nargs='*', metavar='NAME=VALUE', help='Submitted parameter values')
    p.set_defaults(func=do_trigger)


def do_trigger(args):
    try:
        submitted = parse_assignments(args.values)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    resolved = load_job_from_args(args).resolve(submitted)
    for value in resolved.values():
        print(f"{value.name}={'' if value.value is None else value.value}")
    return 0
