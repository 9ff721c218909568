from __future__ import annotations

import requests

from src.site_timeclock.site_timeclock.core.enums import PunchType
from src.site_timeclock.site_timeclock.punches.model import TimeLog
from src.site_timeclock.site_timeclock.settings.model import AppSettings
from src.site_timeclock.site_timeclock.storage.seed import SEED_EMPLOYEES, SEED_SITES
from src.site_timeclock.site_timeclock.sync.webhook import WebhookForwarder, build_payload


class FakePost:
    def __init__(self, error: Exception | None = None):
        self.calls = []
        self._error = error

    def __call__(self, url, *, json, timeout):
        self.calls.append((url, json, timeout))
        if self._error:
            raise self._error


def _run_inline(target):
    target()


def _log(fixed_now, punch=PunchType.OUT, employee_id="1", site_id="2"):
    return TimeLog(
        id="l1",
        employee_id=employee_id,
        site_id=site_id,
        timestamp=fixed_now,
        type=punch,
        photo_snapshot="data:image/jpeg;base64,AAAA",
    )


def test_payload_fields(fixed_now, tz):
    payload = build_payload(_log(fixed_now), employees=SEED_EMPLOYEES, sites=SEED_SITES, tz=tz)

    assert payload == {
        "data": "18/06/2025",
        "hora": "15:00:00",
        "funcionario": "Carlos Silva",
        "tipo": "SAÍDA",
        "obra": "Reforma Shopping Centro",
        "foto": "data:image/jpeg;base64,AAAA",
    }


def test_payload_unknown_references(fixed_now, tz):
    payload = build_payload(
        _log(fixed_now, PunchType.IN, employee_id="x", site_id="y"), employees=[], sites=[], tz=tz
    )

    assert payload["funcionario"] == "Desconhecido"
    assert payload["obra"] == "Desconhecida"
    assert payload["tipo"] == "ENTRADA"


def test_no_url_means_no_request(fixed_now, tz):
    post = FakePost()
    forwarder = WebhookForwarder(tz=tz, http_post=post, spawn=_run_inline)

    forwarder.forward(_log(fixed_now), settings=AppSettings(), employees=SEED_EMPLOYEES, sites=SEED_SITES)

    assert post.calls == []


def test_posts_once_to_configured_url(fixed_now, tz):
    post = FakePost()
    forwarder = WebhookForwarder(tz=tz, timeout=3, http_post=post, spawn=_run_inline)

    forwarder.forward(
        _log(fixed_now),
        settings=AppSettings(webhook_url="https://hooks.example.com/punch"),
        employees=SEED_EMPLOYEES,
        sites=SEED_SITES,
    )

    assert len(post.calls) == 1
    url, body, timeout = post.calls[0]
    assert url == "https://hooks.example.com/punch"
    assert body["funcionario"] == "Carlos Silva"
    assert timeout == 3


def test_failure_is_absorbed(fixed_now, tz, caplog):
    post = FakePost(error=requests.ConnectionError("offline"))
    forwarder = WebhookForwarder(tz=tz, http_post=post, spawn=_run_inline)

    forwarder.forward(
        _log(fixed_now),
        settings=AppSettings(webhook_url="https://hooks.example.com/punch"),
        employees=SEED_EMPLOYEES,
        sites=SEED_SITES,
    )

    assert len(post.calls) == 1
    assert "Failed to send punch l1" in caplog.text


def test_send_runs_detached(fixed_now, tz):
    spawned = []
    post = FakePost()
    forwarder = WebhookForwarder(tz=tz, http_post=post, spawn=spawned.append)

    forwarder.forward(
        _log(fixed_now),
        settings=AppSettings(webhook_url="https://hooks.example.com/punch"),
        employees=SEED_EMPLOYEES,
        sites=SEED_SITES,
    )

    assert post.calls == []
    spawned[0]()
    assert len(post.calls) == 1
