from __future__ import annotations

from typing import Protocol, Sequence

from .model import Site


class SiteRepository(Protocol):
    def get_sites(self) -> Sequence[Site]:
        raise NotImplementedError

    def save_sites(self, sites: Sequence[Site]) -> None:
        raise NotImplementedError
