"""Schema definitions for job parameter configuration."""

from .validators import JobConfig, ParameterDefinitionConfig, ScriptParameterConfig

__all__ = [
    "JobConfig",
    "ParameterDefinitionConfig",
    "ScriptParameterConfig",
]
