from __future__ import annotations

import json
from datetime import timedelta

import pytest

from src.site_timeclock.site_timeclock.assistant.service import (
    EMPTY_REPLY,
    FAILURE_REPLY,
    MISSING_KEY_REPLY,
    AssistantService,
    build_context,
)
from src.site_timeclock.site_timeclock.core.enums import PunchType
from src.site_timeclock.site_timeclock.core.exceptions import ValidationError
from src.site_timeclock.site_timeclock.punches.model import TimeLog
from src.site_timeclock.site_timeclock.storage.seed import SEED_EMPLOYEES, SEED_SITES


class FakeGenerator:
    def __init__(self, reply="Relatório pronto", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def _service(store, tz, generator):
    return AssistantService(employees=store, sites=store, logs=store, generator=generator, tz=tz)


def _log(i, employee_id, when):
    return TimeLog(id=str(i), employee_id=employee_id, site_id="1", timestamp=when, type=PunchType.IN)


def test_reply_is_returned_and_prompt_carries_question(store, tz):
    generator = FakeGenerator()

    reply = _service(store, tz, generator).ask("Quem trabalhou hoje?")

    assert reply == "Relatório pronto"
    assert 'Solicitação do Usuário: "Quem trabalhou hoje?"' in generator.prompts[0]
    assert "Carlos Silva" in generator.prompts[0]


def test_missing_key_reply_without_generator(store, tz):
    assert _service(store, tz, None).ask("Resumo") == MISSING_KEY_REPLY


def test_empty_reply_is_replaced(store, tz):
    assert _service(store, tz, FakeGenerator(reply="")).ask("Resumo") == EMPTY_REPLY
    assert _service(store, tz, FakeGenerator(reply=None)).ask("Resumo") == EMPTY_REPLY


def test_failure_reply_on_error(store, tz):
    generator = FakeGenerator(error=ConnectionError("offline"))

    assert _service(store, tz, generator).ask("Resumo") == FAILURE_REPLY


def test_blank_question_is_rejected(store, tz):
    generator = FakeGenerator()

    with pytest.raises(ValidationError):
        _service(store, tz, generator).ask("   ")
    assert generator.prompts == []


def test_context_keeps_last_fifty_logs_and_names_unknowns(fixed_now, tz):
    logs = [_log(i, "1", fixed_now + timedelta(minutes=i)) for i in range(59)]
    logs.append(_log(59, "missing", fixed_now + timedelta(minutes=59)))

    context = build_context(SEED_EMPLOYEES, logs, SEED_SITES, tz=tz)

    assert len(context["logs"]) == 50
    assert context["logs"][0]["time"] == "18/06/2025, 15:10:00"
    assert context["logs"][-1]["employee"] == "Unknown"
    assert context["logs"][0]["type"] == "ENTRADA"
    assert context["employees"][0] == {"name": "Carlos Silva", "role": "Mestre de Obras", "rate": 35.0}
    json.dumps(context)
