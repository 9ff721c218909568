from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Optional

from .assistant.service import AssistantService, GeminiTextGenerator
from .auth.admin_gate import PinAdminGate
from .common.datetime_utils import load_timezone, now_local
from .core.constants import DEFAULT_TIMEZONE, DEFAULT_WEBHOOK_TIMEOUT
from .database.bootstrap import ensure_kv_table
from .database.connection import DatabaseConnection, DBConfig
from .employees.service import EmployeeService
from .punches.camera import CameraDevice, build_camera
from .punches.service import PunchService
from .punches.session import PunchSession
from .reports.service import ReportService
from .settings.service import SettingsService
from .sites.service import SiteService
from .storage.backend import KeyValueBackend
from .storage.json_file_backend import JsonFileBackend
from .storage.mysql_backend import MySQLKeyValueBackend
from .storage.store import RecordStore
from .sync.webhook import WebhookForwarder


@dataclass(frozen=True)
class Container:
    tz: tzinfo
    store: RecordStore

    employee_service: EmployeeService
    site_service: SiteService
    settings_service: SettingsService
    punch_service: PunchService
    report_service: ReportService
    assistant_service: AssistantService
    punch_session: PunchSession


def build_backend(settings) -> KeyValueBackend:
    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(dict(settings.DB_CONFIG)))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_kv_table(conn)
        return MySQLKeyValueBackend(conn)
    if backend == "file":
        return JsonFileBackend(getattr(settings, "DATA_DIR", "data"))
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(
    settings,
    *,
    backend: Optional[KeyValueBackend] = None,
    camera: Optional[CameraDevice] = None,
    forwarder: Optional[WebhookForwarder] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    tz = load_timezone(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE))
    clock = clock or (lambda: now_local(tz))

    forwarder = forwarder or WebhookForwarder(
        tz=tz,
        timeout=float(getattr(settings, "WEBHOOK_TIMEOUT", DEFAULT_WEBHOOK_TIMEOUT)),
    )
    store = RecordStore(backend or build_backend(settings), forwarder=forwarder)

    employee_service = EmployeeService(store)
    site_service = SiteService(store)
    settings_service = SettingsService(store)
    punch_service = PunchService(store)
    report_service = ReportService(employees=store, sites=store, logs=store, clock=clock)

    api_key = getattr(settings, "GEMINI_API_KEY", "")
    generator = GeminiTextGenerator(api_key, model=settings.GEMINI_MODEL) if api_key else None
    assistant_service = AssistantService(employees=store, sites=store, logs=store, generator=generator, tz=tz)

    punch_session = PunchSession(
        employees=store,
        sites=store,
        punches=punch_service,
        camera=camera or build_camera(getattr(settings, "CAMERA_SOURCE", "none")),
        admin_gate=PinAdminGate(str(getattr(settings, "ADMIN_PIN", "0000"))),
        clock=clock,
        require_camera_ready=bool(getattr(settings, "REQUIRE_CAMERA_READY", False)),
    )

    return Container(
        tz=tz,
        store=store,
        employee_service=employee_service,
        site_service=site_service,
        settings_service=settings_service,
        punch_service=punch_service,
        report_service=report_service,
        assistant_service=assistant_service,
        punch_session=punch_session,
    )
