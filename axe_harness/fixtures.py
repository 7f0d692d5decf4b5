"""Symbolic names for the local HTML documents the suite scans."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable

from axe_harness.core.config import settings
from axe_harness.core.errors import FixtureNotFoundError


@dataclass(frozen=True)
class Fixture:
    name: str
    path: str


DEFAULT_FIXTURES = (
    Fixture("normal", "normal.html"),
    Fixture("nested-iframes", "nested-iframes.html"),
    Fixture("violation", "violation.html"),
    Fixture("include-exclude", "include-exclude.html"),
    Fixture("shadow-error", "shadow-error.html"),
)


class FixtureRegistry:
    """Read-only mapping from fixture name to a browser-loadable URI.

    Relative fixture paths are joined onto ``base_dir`` (itself made absolute
    against the working directory). Existence is not checked here; a missing
    file shows up when the browser navigates to it.
    """

    def __init__(self, fixtures: Iterable[Fixture], base_dir: str | Path = ".") -> None:
        self._base_dir = Path(base_dir)
        self._fixtures = MappingProxyType({f.name: f for f in fixtures})

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def names(self) -> list[str]:
        return list(self._fixtures)

    def get(self, name: str) -> Fixture:
        try:
            return self._fixtures[name]
        except KeyError:
            raise FixtureNotFoundError(name, self.names()) from None

    def path(self, name: str) -> Path:
        fixture = self.get(name)
        return Path(os.path.abspath(self._base_dir / fixture.path))

    def resolve(self, name: str) -> str:
        return self.path(name).as_uri()

    def __contains__(self, name: object) -> bool:
        return name in self._fixtures

    def __len__(self) -> int:
        return len(self._fixtures)


def default_registry(base_dir: str | Path | None = None) -> FixtureRegistry:
    return FixtureRegistry(DEFAULT_FIXTURES, base_dir if base_dir is not None else settings.fixtures_dir)
