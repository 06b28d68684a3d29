#!/usr/bin/env python3
"""
commands/default.py

Print default values, as the host would query them when a job is triggered
without explicit values.

Examples:
  dynparam default -c job.yaml               # All parameters
  dynparam default -c job.yaml -p BRANCH     # One parameter
"""

from DynParamUtils.cli.args import add_job_file_arg, add_parameter_arg
from DynParamUtils.cli.job_utils import load_job_from_args


def register(subparsers):
    p = subparsers.add_parser(
        'default',
        help='Print default parameter values',
        description='Compute the default value of one or all parameters.',
    )
    add_job_file_arg(p)
    add_parameter_arg(p, required=False)
    p.set_defaults(func=do_default)


def do_default(args):
    job = load_job_from_args(args)
    if args.parameter:
        values = [job.get(args.parameter).get_default_parameter_value()]
    else:
        values = list(job.defaults().values())

    for value in values:
        print(f"{value.name}={'' if value.value is None else value.value}")
    return 0
