"""Reusable argparse argument helpers."""

from __future__ import annotations


def add_job_file_arg(parser):
    parser.add_argument(
        "-c",
        "--config",
        required=True,
        help="YAML job file with the parameter definitions",
    )


def add_parameter_arg(parser, required=True):
    parser.add_argument(
        "-p",
        "--parameter",
        required=required,
        help="Parameter name as declared in the job file",
    )
