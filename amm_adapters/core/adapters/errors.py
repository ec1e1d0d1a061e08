from __future__ import annotations


class AmmAdapterError(Exception):
    def __init__(self, message: str, *, pool: str | None = None):
        self.pool = pool
        super().__init__(message)


class InvalidPoolError(AmmAdapterError, ValueError):
    def __init__(self, pool: str, message: str | None = None):
        super().__init__(
            message or f"Invalid pool: {pool} is not a factory pair", pool=pool
        )


class PairMismatchError(AmmAdapterError, ValueError):
    def __init__(
        self,
        pool: str,
        expected: tuple[str, str],
        actual: tuple[str, str],
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Pool {pool} holds {actual[0]}/{actual[1]}, "
            f"requested {expected[0]}/{expected[1]}",
            pool=pool,
        )


class UnsupportedOperationError(AmmAdapterError, NotImplementedError):
    def __init__(self, operation: str, *, pool: str | None = None):
        self.operation = operation
        super().__init__(f"{operation} is not supported", pool=pool)
