#!/usr/bin/env python3
"""
commands/list_scripts.py

List the scripts a parameter can be backed by.

Examples:
  dynparam list-scripts
  dynparam --scripts-dir ./ci/scripts list-scripts --detailed
"""

from DynParamUtils.cli.job_utils import get_provider_for_args
from DynParamUtils.parameters import default_registry


def register(subparsers):
    p = subparsers.add_parser(
        'list-scripts',
        help='List registered scripts',
        description='List the scripts available to dynamic parameters.',
    )
    p.add_argument('--detailed', action='store_true', help='Show comments and default parameters')
    p.set_defaults(func=do_list)


def do_list(args):
    provider = get_provider_for_args(args)
    descriptor = default_registry().get('choice')
    scripts = sorted(descriptor.scripts(provider.registry), key=lambda s: s.id)
    if not scripts:
        print("No scripts found")
        return 0

    for script in scripts:
        print(f"{script.id}  {script.name}")
        if args.detailed:
            if script.comment:
                print(f"  {script.comment}")
            for key, value in script.parameters:
                print(f"  {key} = {value}")
    return 0
