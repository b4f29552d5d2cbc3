from __future__ import annotations

from typing import Any


class StubCall:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error

    def call(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.result


class StubFunctions:
    """Contract ``functions`` namespace serving canned results by name."""

    def __init__(self, results: dict[str, Any], errors: dict[str, Exception] | None = None) -> None:
        self.results = results
        self.errors = errors or {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def __getattr__(self, name: str) -> Any:
        if name not in self.results and name not in self.errors:
            raise AttributeError(name)

        def _bound(*args: Any) -> StubCall:
            self.calls.append((name, args))
            result = self.results.get(name)
            if callable(result):
                result = result(*args)
            return StubCall(result=result, error=self.errors.get(name))

        return _bound


class StubContract:
    def __init__(self, functions: StubFunctions) -> None:
        self.functions = functions


class StubEth:
    def __init__(self, functions: StubFunctions) -> None:
        self._functions = functions
        self.contracts: list[tuple[str, list[dict[str, Any]]]] = []

    def contract(self, address: str, abi: list[dict[str, Any]]) -> StubContract:
        self.contracts.append((address, abi))
        return StubContract(self._functions)


class StubWeb3:
    def __init__(self, results: dict[str, Any], errors: dict[str, Exception] | None = None) -> None:
        self.functions = StubFunctions(results, errors)
        self.eth = StubEth(self.functions)

    @staticmethod
    def to_checksum_address(address: str) -> str:
        return address.lower()
