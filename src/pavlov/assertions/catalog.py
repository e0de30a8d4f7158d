"""Name -> check registry that handler classes are generated from."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Iterator, Literal, Mapping

from pavlov.assertions.base import BinaryCheck, Check, UnaryCheck

if TYPE_CHECKING:
    from pavlov.config import PavlovConfig

logger = logging.getLogger(__name__)

CollisionPolicy = Literal["error", "replace"]


class CatalogError(ValueError):
    """Raised when a check cannot be registered."""


class Catalog:
    """Insertion-ordered mapping of check names to check descriptors.

    A catalog is filled once (usually at import time) and then frozen.
    Registering a name twice raises ``CatalogError`` unless the catalog was
    created with ``on_collision="replace"`` or the registration passes
    ``replace=True``.
    """

    def __init__(self, on_collision: CollisionPolicy = "error") -> None:
        if on_collision not in ("error", "replace"):
            raise CatalogError(f"Unknown collision policy: {on_collision!r}")
        self.on_collision = on_collision
        self._checks: dict[str, Check] = {}
        self._frozen = False

    @classmethod
    def from_config(cls, config: PavlovConfig) -> Catalog:
        return cls(on_collision=config.on_collision)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def checks(self) -> Mapping[str, Check]:
        return MappingProxyType(self._checks)

    def register(self, check: Check, replace: bool = False) -> Check:
        if not isinstance(check, (UnaryCheck, BinaryCheck)):
            raise CatalogError(f"Not a check descriptor: {check!r}")
        if self._frozen:
            raise CatalogError(
                f"Cannot register '{check.name}': catalog is frozen"
            )
        if not check.name.isidentifier():
            raise CatalogError(f"Check name '{check.name}' is not a valid identifier")
        if check.name in self._checks:
            if not (replace or self.on_collision == "replace"):
                raise CatalogError(f"Check '{check.name}' already exists")
            logger.debug(f"Replacing check {check.name}")
        self._checks[check.name] = check
        logger.debug(f"Registered {type(check).__name__} {check.name}")
        return check

    def unary(
        self,
        name: str | None = None,
        *,
        print_value: bool = True,
        print_details: bool = False,
        replace: bool = False,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator registering ``func(value, message)`` as a unary check."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(
                UnaryCheck(
                    name=name or func.__name__,
                    func=func,
                    print_value=print_value,
                    print_details=print_details,
                ),
                replace=replace,
            )
            return func

        return decorator

    def binary(
        self,
        name: str | None = None,
        *,
        print_value: bool = True,
        print_details: bool = False,
        print_expected: Callable[[Any], bool] | None = None,
        replace: bool = False,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator registering ``func(value, expected, message)`` as a binary check."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(
                BinaryCheck(
                    name=name or func.__name__,
                    func=func,
                    print_value=print_value,
                    print_details=print_details,
                    print_expected=print_expected,
                ),
                replace=replace,
            )
            return func

        return decorator

    def update(self, other: Catalog, replace: bool = False) -> None:
        """Register every check of *other*, in its order."""
        for check in other:
            self.register(check, replace=replace)

    def freeze(self) -> Catalog:
        self._frozen = True
        return self

    def names(self) -> list[str]:
        return list(self._checks)

    def __getitem__(self, name: str) -> Check:
        return self._checks[name]

    def __contains__(self, name: object) -> bool:
        return name in self._checks

    def __iter__(self) -> Iterator[Check]:
        return iter(self._checks.values())

    def __len__(self) -> int:
        return len(self._checks)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<Catalog {len(self)} checks, {state}>"
