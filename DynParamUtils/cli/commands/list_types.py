#!/usr/bin/env python3
"""
commands/list_types.py

List registered parameter types with their display names.
"""

from DynParamUtils.parameters import default_registry


def register(subparsers):
    p = subparsers.add_parser(
        'list-types',
        help='List parameter types',
        description='List registered parameter types and their display names.',
    )
    p.set_defaults(func=do_list)


def do_list(args):
    registry = default_registry()
    for name in registry.names():
        print(f"{name:<10} {registry.get(name).display_name(args.locale)}")
    return 0
