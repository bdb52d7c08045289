"""Exception hierarchy shared by the code generation helpers."""


class CodegenError(Exception):
    """Base exception for tds_codegen errors."""

    pass


class InheritanceCycleError(CodegenError):
    """Raised when a template inherits from itself, directly or indirectly."""

    def __init__(self, path):
        self.path = list(path)
        chain = " -> ".join(self.path)
        super().__init__(f"Template inheritance cycle detected: {chain}")
