"""
job_utils.py

Common utilities for CLI commands that work with job files.
"""

from DynParamUtils.config import load_job
from DynParamUtils.scripts import get_provider


def get_provider_for_args(args):
    return get_provider(getattr(args, "scripts_dir", None), getattr(args, "python", None))


def load_job_from_args(args):
    return load_job(args.config, get_provider_for_args(args))


def parse_assignments(tokens):
    """Parse NAME=VALUE tokens; the value may be empty or contain '='."""
    result = {}
    for token in tokens or ():
        if "=" not in token:
            raise ValueError(f"Expected NAME=VALUE, got '{token}'")
        key, value = token.split("=", 1)
        result[key] = value
    return result
