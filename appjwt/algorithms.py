"""Registry of JWT signing algorithms."""

from __future__ import annotations

from jwt.algorithms import Algorithm, HMACAlgorithm, get_default_algorithms

# An unsigned assertion is never a valid application token.
EXCLUDED_ALGORITHMS = frozenset({"none"})


class AlgorithmRegistry:
    """Maps algorithm names (``RS256``, ``ES256``, ...) to PyJWT implementations."""

    def __init__(self, algorithms: dict[str, Algorithm] | None = None) -> None:
        if algorithms is None:
            algorithms = get_default_algorithms()
        self._algorithms = {
            name: impl for name, impl in algorithms.items() if name not in EXCLUDED_ALGORITHMS
        }

    def get(self, name: str) -> Algorithm | None:
        """Return the implementation for ``name``, or ``None`` if unknown."""
        if not name:
            return None
        return self._algorithms.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def names(self) -> list[str]:
        """Sorted list of registered algorithm names."""
        return sorted(self._algorithms)

    def is_asymmetric(self, name: str) -> bool:
        """True if ``name`` signs with a private key rather than a shared secret."""
        impl = self.get(name)
        return impl is not None and not isinstance(impl, HMACAlgorithm)


DEFAULT_REGISTRY = AlgorithmRegistry()
