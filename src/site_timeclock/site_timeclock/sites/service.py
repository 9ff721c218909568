from __future__ import annotations

import uuid

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Site
from .repository import SiteRepository


class SiteService:
    """Use case: register and remove construction sites. Sites are not edited."""

    def __init__(self, sites: SiteRepository):
        self._sites = sites

    def list_all(self) -> list[Site]:
        return list(self._sites.get_sites())

    def list_active(self) -> list[Site]:
        return [s for s in self._sites.get_sites() if s.active]

    def create(self, *, name: str, address: str = "") -> Site:
        site = Site(
            id=str(uuid.uuid4()),
            name=require_non_empty(name, "Nome da obra"),
            address=(address or "").strip(),
            active=True,
        )
        self._sites.save_sites([*self._sites.get_sites(), site])
        return site

    def delete(self, site_id: str) -> None:
        sites = list(self._sites.get_sites())
        remaining = [s for s in sites if s.id != site_id]
        if len(remaining) == len(sites):
            raise NotFoundError("Obra não encontrada")
        self._sites.save_sites(remaining)
