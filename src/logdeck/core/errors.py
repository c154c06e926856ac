"""Error taxonomy for panel selection and registry navigation.

All of these are local and recoverable. Nothing in the core aborts the process.
"""


class NameNotResolved(LookupError):
    """A configured module name has no matching module identity."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("unknown module name: {!r}".format(name))


class ModuleNotFound(LookupError):
    """The module is not active in the registry."""

    def __init__(self, module) -> None:
        self.module = module
        super().__init__("module not active: {}".format(getattr(module, "name", module)))


class PreconditionViolation(RuntimeError):
    """Navigation was requested from a module that is not in the registry."""
