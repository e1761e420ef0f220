from ._config import Config, get_config, set_config
from ._errors import ConfigurationError, ContractViolationError
from ._main import CommonBase, Pipeable
from ._protocols import Restartable, Source, SupportsRichComparison, can_restart

__all__ = [
    "CommonBase",
    "Config",
    "ConfigurationError",
    "ContractViolationError",
    "Pipeable",
    "Restartable",
    "Source",
    "SupportsRichComparison",
    "can_restart",
    "get_config",
    "set_config",
]
