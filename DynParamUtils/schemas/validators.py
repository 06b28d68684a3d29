"""Pydantic models for validating job parameter configuration."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

CHOICE_TYPE_PATTERN = "^(PT_SINGLE_SELECT|PT_MULTI_SELECT|PT_CHECKBOX|PT_RADIO)$"


class ScriptParameterConfig(BaseModel):
    """Validate a name/value pair bound into a script."""

    name: str = Field(min_length=1)
    value: Any = None


class ParameterDefinitionConfig(BaseModel):
    """Validate one dynamic parameter definition."""

    name: str = Field(min_length=1)
    description: str = ""
    uuid: Optional[str] = None
    type: str = Field(default="choice", pattern="^(string|choice|boolean)$")
    script_id: str = Field(min_length=1, description="Id of the registered script")
    parameters: List[ScriptParameterConfig] = Field(default_factory=list)
    remote: bool = False
    readonly_input_field: bool = False
    choice_type: str = Field(default="PT_SINGLE_SELECT", pattern=CHOICE_TYPE_PATTERN)


class JobConfig(BaseModel):
    """Validate a job's parameter configuration file."""

    name: Optional[str] = None
    parameters: List[ParameterDefinitionConfig] = Field(default_factory=list)
