from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..auth.admin_gate import AdminGate
from ..core.constants import LOOKUP_ERROR_SECONDS, PHONE_SUFFIX_LENGTH, PUNCH_MESSAGE_SECONDS
from ..core.enums import MessageKind, PunchType, SessionState
from ..core.exceptions import AuthenticationError, DeviceError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import find_by_phone_suffix
from ..sites.model import Site
from ..sites.repository import SiteRepository
from .camera import CameraDevice
from .model import TimeLog
from .service import PunchService
from .snapshot import Frame, encode_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KioskMessage:
    kind: MessageKind
    text: str
    expires_at: datetime

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class SessionView:
    """What the kiosk screen needs to render; never exposes the digits themselves."""

    state: SessionState
    digits_entered: int
    employee_name: Optional[str]
    selected_site_id: Optional[str]
    camera_ready: bool
    message: Optional[KioskMessage]

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "digits_entered": self.digits_entered,
            "employee_name": self.employee_name,
            "selected_site_id": self.selected_site_id,
            "camera_ready": self.camera_ready,
            "message": self.message.to_dict() if self.message else None,
        }


@dataclass(frozen=True)
class PunchResult:
    log: TimeLog
    employee: Employee
    site: Site
    message: KioskMessage


class PunchSession:
    """Kiosk punch flow: IDENTIFY (type the phone suffix) then CONFIRM (photo + commit).

    The camera is held only while in CONFIRM and is released on commit,
    cancel and ``close``. The selected site is kiosk-wide and survives
    between punches. One session serves every request thread, so each public
    method runs under ``self.lock``.
    """

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        sites: SiteRepository,
        punches: PunchService,
        camera: CameraDevice,
        admin_gate: AdminGate,
        clock: Callable[[], datetime],
        require_camera_ready: bool = False,
    ):
        self._employees = employees
        self._sites = sites
        self._punches = punches
        self._camera = camera
        self._admin_gate = admin_gate
        self._clock = clock
        self._require_camera_ready = bool(require_camera_ready)
        # reentrant: view() polls, and most operations end with view()
        self.lock = threading.RLock()

        self._state = SessionState.IDENTIFY
        self._input = ""
        self._employee: Optional[Employee] = None
        self._site_id: Optional[str] = None
        self._message: Optional[KioskMessage] = None
        self._clear_input_on_expiry = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def employee(self) -> Optional[Employee]:
        return self._employee

    def view(self, *, now: datetime | None = None) -> SessionView:
        with self.lock:
            self.poll(now=now)
            return SessionView(
                state=self._state,
                digits_entered=len(self._input),
                employee_name=self._employee.first_name if self._employee else None,
                selected_site_id=self._site_id,
                camera_ready=self._state is SessionState.CONFIRM and self._camera.ready,
                message=self._message,
            )

    def poll(self, *, now: datetime | None = None) -> None:
        """Expire the transient message; a failed lookup also clears the input here."""
        now = now or self._clock()
        with self.lock:
            if self._message and now >= self._message.expires_at:
                self._message = None
                if self._clear_input_on_expiry:
                    self._input = ""
                    self._clear_input_on_expiry = False

    # IDENTIFY

    def press_digit(self, digit: str, *, now: datetime | None = None) -> SessionView:
        now = now or self._clock()
        if not isinstance(digit, str) or len(digit) != 1 or not digit.isdigit():
            raise ValidationError("Dígito inválido")
        with self.lock:
            self.poll(now=now)
            if self._state is not SessionState.IDENTIFY:
                raise ValidationError("Finalize ou cancele o registro atual")

            if len(self._input) < PHONE_SUFFIX_LENGTH:
                self._input += digit
                if len(self._input) == PHONE_SUFFIX_LENGTH:
                    self._identify(now)
            return self.view(now=now)

    def clear(self, *, now: datetime | None = None) -> SessionView:
        now = now or self._clock()
        with self.lock:
            if self._state is SessionState.IDENTIFY:
                self._input = ""
                if self._clear_input_on_expiry:
                    self._message = None
                    self._clear_input_on_expiry = False
            return self.view(now=now)

    def admin_login(self, pin: str, *, now: datetime | None = None) -> None:
        with self.lock:
            self.poll(now=now)
            if self._state is not SessionState.IDENTIFY:
                raise ValidationError("Finalize ou cancele o registro atual")
        if not self._admin_gate.verify(pin):
            raise AuthenticationError("PIN Incorreto")
        logger.info("Admin area unlocked from kiosk")

    def _identify(self, now: datetime) -> None:
        employee = find_by_phone_suffix(self._employees.get_employees(), self._input)
        if employee is None:
            logger.info("No active employee matches the entered phone suffix")
            self._message = KioskMessage(
                MessageKind.ERROR,
                "Funcionário não encontrado.",
                now + timedelta(seconds=LOOKUP_ERROR_SECONDS),
            )
            self._clear_input_on_expiry = True
            return
        self._enter_confirm(employee, now)

    # CONFIRM

    def _enter_confirm(self, employee: Employee, now: datetime) -> None:
        self._state = SessionState.CONFIRM
        self._employee = employee
        self._message = None

        active = [s for s in self._sites.get_sites() if s.active]
        if not any(s.id == self._site_id for s in active):
            self._site_id = active[0].id if active else None

        try:
            self._camera.start()
        except DeviceError as e:
            logger.warning("Camera unavailable: %s", e)
            self._message = KioskMessage(MessageKind.ERROR, str(e), now + timedelta(seconds=LOOKUP_ERROR_SECONDS))

    def select_site(self, site_id: str, *, now: datetime | None = None) -> SessionView:
        site = next((s for s in self._sites.get_sites() if s.id == site_id), None)
        if site is None:
            raise NotFoundError("Obra não encontrada")
        if not site.active:
            raise ValidationError("Obra inativa")
        with self.lock:
            self._site_id = site_id
            return self.view(now=now)

    def confirm(self, *, frame: Optional[Frame] = None, now: datetime | None = None) -> PunchResult:
        now = now or self._clock()
        with self.lock:
            self.poll(now=now)
            if self._state is not SessionState.CONFIRM or self._employee is None:
                raise ValidationError("Nenhum funcionário identificado")

            site = next((s for s in self._sites.get_sites() if s.id == self._site_id and s.active), None)
            if site is None:
                raise ValidationError("Selecione uma obra antes de registrar.")
            if self._require_camera_ready and frame is None and not self._camera.ready:
                raise ValidationError("Aguarde a câmera ficar pronta")

            employee = self._employee
            try:
                snapshot = self._snapshot(frame)
                log = self._punches.record(
                    employee_id=employee.id,
                    site_id=site.id,
                    photo_snapshot=snapshot,
                    now=now,
                )
            finally:
                self._reset()

            kind = MessageKind.SUCCESS if log.type is PunchType.IN else MessageKind.EXIT
            self._message = KioskMessage(
                kind,
                f"Olá, {employee.first_name}! {log.type.label} registrada.",
                now + timedelta(seconds=PUNCH_MESSAGE_SECONDS),
            )
            logger.info("Punch %s recorded for employee %s at site %s", log.type.value, employee.id, site.id)
            return PunchResult(log=log, employee=employee, site=site, message=self._message)

    def cancel(self, *, now: datetime | None = None) -> SessionView:
        with self.lock:
            if self._state is SessionState.CONFIRM:
                self._reset()
                self._message = None
            else:
                self._input = ""
            return self.view(now=now)

    def close(self) -> None:
        with self.lock:
            self._reset()

    def _snapshot(self, frame: Optional[Frame]) -> str:
        if frame is None:
            try:
                frame = self._camera.capture() if self._camera.ready else None
            except DeviceError as e:
                logger.warning("Snapshot skipped: %s", e)
                return ""
        if frame is None:
            return ""
        try:
            return encode_snapshot(frame)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Snapshot could not be encoded: %s", e)
            return ""

    def _reset(self) -> None:
        self._camera.stop()
        self._state = SessionState.IDENTIFY
        self._employee = None
        self._input = ""
        self._clear_input_on_expiry = False
