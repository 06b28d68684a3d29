#!/usr/bin/env python3
"""
commands/choices.py

Run a parameter's script and print its current choices, one per line.

Examples:
  dynparam choices -c job.yaml -p BRANCH
  dynparam choices -c job.yaml -p BRANCH --count
"""

from DynParamUtils.cli.args import add_job_file_arg, add_parameter_arg
from DynParamUtils.cli.job_utils import load_job_from_args
from DynParamUtils.formatting import format_optional


def register(subparsers):
    p = subparsers.add_parser(
        'choices',
        help='Print the current choices of a parameter',
        description='Execute the parameter script and print the resulting choices.',
    )
    add_job_file_arg(p)
    add_parameter_arg(p)
    p.add_argument('--count', action='store_true', help='Also print the visible item count')
    p.set_defaults(func=do_choices)


def do_choices(args):
    definition = load_job_from_args(args).get(args.parameter)
    choices = definition.get_choices()
    for choice in choices:
        print(format_optional(choice, ""))
    if args.count:
        print(f"# visible items: {definition.get_visible_item_count()}")
    return 0
