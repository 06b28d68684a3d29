"""Custom exception hierarchy for dynamic parameter utilities."""


class DynParamError(Exception):
    """Base exception for all dynamic parameter errors."""


class ScriptNotFoundError(DynParamError):
    """Raised when a script id does not resolve in the registry."""

    def __init__(self, script_id):
        super().__init__(f"Script not found: {script_id}")
        self.script_id = script_id


class ScriptExecutionError(DynParamError):
    """Raised when a script fails to compile or run."""


class InvalidChoiceError(DynParamError):
    """Raised when a submitted value is not among the current choices."""

    def __init__(self, value):
        super().__init__(f"Illegal choice: {value}")
        self.value = value


class ValidationError(DynParamError):
    """Raised when a parameter definition or job configuration is invalid."""


class ConfigError(DynParamError):
    """Raised when a configuration file cannot be read or parsed."""


class TemplateError(DynParamError):
    """Raised when template rendering fails."""


class UnknownParameterTypeError(DynParamError, KeyError):
    """Raised when no descriptor is registered for a parameter type."""

    def __init__(self, type_name):
        super().__init__(f"Unknown parameter type '{type_name}'")
        self.type_name = type_name

    def __str__(self):
        return self.args[0]
