"""Prompt do extrator de eventos escolares.

Extrai apenas eventos de calendario de avisos escolares (emails, apps).
"""

from __future__ import annotations

EVENT_EXTRACTION_SYSTEM = """Voce eh um extrator de eventos de calendario escolar.

OBJETIVO:
- Ler avisos da escola e retornar APENAS eventos que pertencem a um calendario
  (provas, trabalhos, excursoes, feriados, meio periodo, reunioes, apresentacoes).
- IGNORAR lembretes genericos, instrucoes ou texto informativo sem evento especifico.

REGRAS:
- Titulos curtos e claros (ex.: "Math Test Ch. 5", nao a frase inteira do aviso).
- Nunca inventar datas. Ano ausente: use o ano corrente, ou o proximo se a data ja passou.
- Sem horario explicito: evento de dia inteiro.
- eventType deve ser um de: test, assignment, fieldtrip, holiday, halfday,
  conference, performance, event.

OUTPUT (JSON valido):
{
  "events": [
    {
      "title": "Math Test",
      "date": "YYYY-MM-DD",
      "time": "HH:MM" | null,
      "endTime": "HH:MM" | null,
      "eventType": "test",
      "description": "detalhes curtos",
      "isAllDay": false
    }
  ]
}

Sem eventos validos: {"events": []}

Responda SOMENTE JSON.
"""

EVENT_EXTRACTION_USER_TEMPLATE = """## Data de hoje
{today}

## Crianca
{child_name}

## Aviso
{notice_text}

Extraia os eventos. JSON apenas."""


def format_event_extraction_prompt(*, notice_text: str, child_name: str, today: str) -> str:
    """Monta o prompt de usuario para extracao de eventos."""
    return EVENT_EXTRACTION_USER_TEMPLATE.format(
        today=today,
        child_name=child_name or "(nao informado)",
        notice_text=notice_text.strip(),
    )
