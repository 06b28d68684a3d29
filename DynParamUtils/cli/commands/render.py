#!/usr/bin/env python3
"""
commands/render.py

Render a parameter's form fragment.

Examples:
  dynparam render -c job.yaml -p BRANCH
  dynparam render -c job.yaml -p BRANCH -o branch.html
"""

from pathlib import Path

from DynParamUtils.cli.args import add_job_file_arg, add_parameter_arg
from DynParamUtils.cli.job_utils import load_job_from_args
from DynParamUtils.templates import render_parameter


def register(subparsers):
    p = subparsers.add_parser(
        'render',
        help='Render the form fragment of a parameter',
        description='Render a parameter as an HTML form fragment.',
    )
    add_job_file_arg(p)
    add_parameter_arg(p)
    p.add_argument('-o', '--output-file', help='Write to a file instead of stdout')
    p.set_defaults(func=do_render)


def do_render(args):
    definition = load_job_from_args(args).get(args.parameter)
    content = render_parameter(definition)
    if args.output_file:
        path = Path(args.output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        print(f"Wrote {path}")
    else:
        print(content)
    return 0
