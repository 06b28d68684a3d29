#!/usr/bin/env python3
import argparse
import importlib
import logging
import pkgutil
import sys

from DynParamUtils.exceptions import DynParamError


def _generate_command_help(subparsers):
    """Auto-generate command list from registered subparsers."""
    commands = []

    for name in sorted(subparsers.choices.keys()):
        parser = subparsers.choices[name]
        help_text = parser.description or ''
        commands.append(f"  {name:<16} {help_text}")

    lines = ["Available commands:", ""]
    lines.extend(commands)
    return "\n".join(lines)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dynparam",
        description="Evaluate script-backed job parameters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--scripts-dir', help='Script directory (default: $DYNPARAM_SCRIPTS_DIR or ./scripts)')
    parser.add_argument('--python', help='Interpreter for remote scripts (default: $DYNPARAM_PYTHON or current)')
    parser.add_argument('--locale', help='Locale for display names (default: $DYNPARAM_LOCALE or en)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subs = parser.add_subparsers(dest='cmd')

    # Every module in cli/commands defines register(subparsers)
    pkg = importlib.import_module('DynParamUtils.cli.commands')
    for finder, name, ispkg in pkgutil.iter_modules(pkg.__path__):
        mod = importlib.import_module(f"DynParamUtils.cli.commands.{name}")
        if hasattr(mod, 'register'):
            mod.register(subs)

    parser.epilog = f"""
{_generate_command_help(subs)}

JOB FILES:
Parameter definitions are read from a YAML job file (-c job.yaml), e.g.
  parameters:
    - name: BRANCH
      type: choice
      script_id: list_branches.py

ENVIRONMENT:
  DYNPARAM_SCRIPTS_DIR    directory holding *.py scripts and catalog.yaml
  DYNPARAM_PYTHON         interpreter used for remote=true parameters
  DYNPARAM_LOCALE         locale for display names

For detailed help: dynparam <command> --help
"""
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cmd:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except DynParamError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
