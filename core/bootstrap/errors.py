"""
Painel Bootstrap — System Errors
===================================
If a store invariant is violated at startup,
the process must refuse to serve it.
"""


class SystemBootstrapError(Exception):
    """
    Raised when a store invariant is violated during boot.

    If this exception is raised:
    - The store is NOT exposed to callers
    - No fallback, no warning-only mode
    """

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(
            f"PAINEL BOOTSTRAP FAILURE — {invariant}: {detail}"
        )
