"""Load job parameter definitions from YAML files.

Example job file::

    name: deploy
    parameters:
      - name: BRANCH
        type: choice
        script_id: list_branches.py
        parameters:
          - {name: repository, value: https://example.org/app.git}
        choice_type: PT_SINGLE_SELECT
      - name: DRY_RUN
        type: boolean
        script_id: dry_run_default.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigError, ValidationError
from .parameters import DescriptorRegistry, JobParameters, ScriptParameter, default_registry
from .schemas import JobConfig
from .scripts.provider import ScriptResultProvider


def read_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML job file into a dict."""
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read job config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Job config {config_path} must be a mapping")
    return data


def build_job(
    data: Dict[str, Any],
    provider: ScriptResultProvider,
    registry: Optional[DescriptorRegistry] = None,
) -> JobParameters:
    """Validate raw configuration and build the job's definitions."""
    try:
        job = JobConfig(**data)
    except PydanticValidationError as exc:
        raise ValidationError(str(exc)) from exc

    registry = registry or default_registry()
    definitions = [
        registry.create(
            item.type,
            name=item.name,
            description=item.description,
            uuid=item.uuid,
            script_id=item.script_id,
            parameters=[ScriptParameter(p.name, p.value) for p in item.parameters],
            remote=item.remote,
            provider=provider,
            readonly_input_field=item.readonly_input_field,
            choice_type=item.choice_type,
        )
        for item in job.parameters
    ]
    return JobParameters(definitions, name=job.name)


def load_job(
    path: Union[str, Path],
    provider: ScriptResultProvider,
    registry: Optional[DescriptorRegistry] = None,
) -> JobParameters:
    return build_job(read_config(path), provider, registry)
