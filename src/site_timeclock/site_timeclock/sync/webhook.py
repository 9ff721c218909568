from __future__ import annotations

import logging
from datetime import tzinfo
from threading import Thread
from typing import Callable, Optional, Sequence

import requests

from ..common.datetime_utils import format_br_date, format_br_time
from ..core.constants import DEFAULT_WEBHOOK_TIMEOUT
from ..employees.model import Employee
from ..punches.model import TimeLog
from ..settings.model import AppSettings
from ..sites.model import Site

logger = logging.getLogger(__name__)


def build_payload(log: TimeLog, *, employees: Sequence[Employee], sites: Sequence[Site], tz: tzinfo) -> dict:
    """Row sent to the spreadsheet script; field names are what the script reads."""
    employee = next((e for e in employees if e.id == log.employee_id), None)
    site = next((s for s in sites if s.id == log.site_id), None)
    return {
        "data": format_br_date(log.timestamp, tz),
        "hora": format_br_time(log.timestamp, tz),
        "funcionario": employee.name if employee else "Desconhecido",
        "tipo": log.type.label,
        "obra": site.name if site else "Desconhecida",
        "foto": log.photo_snapshot or "",
    }


def _start_daemon(target: Callable[[], None]) -> None:
    Thread(target=target, daemon=True).start()


class WebhookForwarder:
    """Best-effort relay of each new punch to the configured webhook.

    One POST per punch on a detached daemon thread. The response is not
    inspected, failures are logged, nothing is retried.
    """

    def __init__(
        self,
        *,
        tz: tzinfo,
        timeout: float = DEFAULT_WEBHOOK_TIMEOUT,
        http_post: Optional[Callable[..., object]] = None,
        spawn: Optional[Callable[[Callable[[], None]], None]] = None,
    ):
        self._tz = tz
        self._timeout = timeout
        self._http_post = http_post or requests.post
        self._spawn = spawn or _start_daemon

    def forward(
        self,
        log: TimeLog,
        *,
        settings: AppSettings,
        employees: Sequence[Employee],
        sites: Sequence[Site],
    ) -> None:
        url = settings.webhook_url
        if not url:
            return

        payload = build_payload(log, employees=employees, sites=sites, tz=self._tz)
        self._spawn(lambda: self._send(url, payload, log.id))

    def _send(self, url: str, payload: dict, log_id: str) -> None:
        try:
            self._http_post(url, json=payload, timeout=self._timeout)
            logger.info("[SYNC] Punch %s sent to webhook", log_id)
        except Exception as e:
            logger.warning("[SYNC] Failed to send punch %s to webhook: %s", log_id, e)
