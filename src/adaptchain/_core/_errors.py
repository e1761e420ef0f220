class ConfigurationError(ValueError):
    """Raised at construction time for provably invalid parameters."""


class ContractViolationError(RuntimeError):
    """Raised when caller-supplied logic breaks the contract an adaptor relies on."""
