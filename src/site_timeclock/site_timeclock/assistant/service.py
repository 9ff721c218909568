from __future__ import annotations

import json
import logging
from datetime import tzinfo
from typing import Optional, Protocol, Sequence

from google import genai

from ..common.datetime_utils import format_br_datetime
from ..common.validators import require_non_empty
from ..core.constants import ASSISTANT_LOG_LIMIT, DEFAULT_GEMINI_MODEL
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..punches.model import TimeLog
from ..punches.repository import TimeLogRepository
from ..sites.model import Site
from ..sites.repository import SiteRepository

logger = logging.getLogger(__name__)

MISSING_KEY_REPLY = "Erro: Chave de API não configurada."
EMPTY_REPLY = "Não foi possível gerar o relatório."
FAILURE_REPLY = "Erro ao comunicar com a IA. Verifique sua conexão ou chave de API."


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> Optional[str]:
        raise NotImplementedError


class GeminiTextGenerator(TextGenerator):
    def __init__(self, api_key: str, *, model: str = DEFAULT_GEMINI_MODEL):
        self._client = genai.Client(api_key=api_key)
        self._model = model

    def generate(self, prompt: str) -> Optional[str]:
        response = self._client.models.generate_content(model=self._model, contents=prompt)
        return response.text


def build_context(
    employees: Sequence[Employee],
    logs: Sequence[TimeLog],
    sites: Sequence[Site],
    *,
    tz: tzinfo,
    log_limit: int = ASSISTANT_LOG_LIMIT,
) -> dict:
    names = {e.id: e.name for e in employees}
    site_names = {s.id: s.name for s in sites}
    recent = list(logs)[-log_limit:] if log_limit > 0 else []
    return {
        "employees": [{"name": e.name, "role": e.role.label, "rate": e.hourly_rate} for e in employees],
        "sites": [{"id": s.id, "name": s.name} for s in sites],
        "logs": [
            {
                "employee": names.get(log.employee_id, "Unknown"),
                "site": site_names.get(log.site_id, "Unknown"),
                "type": log.type.label,
                "time": format_br_datetime(log.timestamp, tz),
            }
            for log in recent
        ],
    }


def build_prompt(context: dict, question: str) -> str:
    return (
        "Você é um assistente administrativo sênior de uma construtora.\n"
        "Analise os dados abaixo e responda à solicitação do usuário.\n"
        "Responda sempre em Português do Brasil, de forma profissional e sucinta.\n"
        "\n"
        "Dados (JSON):\n"
        f"{json.dumps(context, ensure_ascii=False, indent=2)}\n"
        "\n"
        f'Solicitação do Usuário: "{question}"\n'
    )


class AssistantService:
    """Stateless relay: each question is answered from a fresh snapshot of the data."""

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        sites: SiteRepository,
        logs: TimeLogRepository,
        generator: Optional[TextGenerator],
        tz: tzinfo,
    ):
        self._employees = employees
        self._sites = sites
        self._logs = logs
        self._generator = generator
        self._tz = tz

    def ask(self, question: str) -> str:
        question = require_non_empty(question, "Pergunta")
        if self._generator is None:
            return MISSING_KEY_REPLY

        context = build_context(
            self._employees.get_employees(),
            self._logs.get_logs(),
            self._sites.get_sites(),
            tz=self._tz,
        )
        try:
            text = self._generator.generate(build_prompt(context, question))
        except Exception as e:
            logger.error("Assistant request failed: %s", e)
            return FAILURE_REPLY
        return text or EMPTY_REPLY
