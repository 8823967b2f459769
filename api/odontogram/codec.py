"""
Leitura e escrita do documento de procedimentos do odontograma.

O documento é armazenado sem esquema, então a leitura é tolerante:
entradas que não têm o formato de um procedimento são descartadas e
contadas, nunca propagadas como erro.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, List, Optional

from django.utils import timezone

PROCEDURES_KEY = 'procedures'
LEGACY_PROCEDURES_KEY = 'procedimentos'

# Chaves gravadas por versões anteriores, lidas só quando a atual falta
LEGACY_ALIASES = {
    'tooth': 'dente',
    'type': 'tipo',
    'note': 'observacao',
    'occurredAt': 'data',
}

OPTIONAL_KEYS = ('face', 'note', 'id', 'occurredAt')


@dataclass(frozen=True)
class ProcedureEntry:
    """Um procedimento aplicado a um dente"""

    tooth: str
    type: str
    id: Optional[str] = None
    face: Optional[str] = None
    note: Optional[str] = None
    occurred_at: Optional[str] = None

    @classmethod
    def new(cls, tooth: str, type: str, face: Optional[str] = None, note: Optional[str] = None) -> 'ProcedureEntry':
        """Entrada nova com id e horário definidos pelo servidor"""
        return cls(
            id=str(uuid.uuid4()),
            tooth=tooth,
            type=type,
            face=face,
            note=note,
            occurred_at=timezone.localtime().isoformat(),
        )


@dataclass(frozen=True)
class DecodeResult:
    entries: List[ProcedureEntry] = field(default_factory=list)
    dropped: int = 0


def _lookup(raw: dict, key: str) -> Any:
    if key in raw:
        return raw[key]
    legacy = LEGACY_ALIASES.get(key)
    if legacy is not None:
        return raw.get(legacy)
    return None


def _is_filled_string(value) -> bool:
    return isinstance(value, str) and value != ''


def _decode_entry(raw) -> Optional[ProcedureEntry]:
    if not isinstance(raw, dict):
        return None

    tooth = _lookup(raw, 'tooth')
    type_ = _lookup(raw, 'type')
    if not _is_filled_string(tooth) or not _is_filled_string(type_):
        return None

    optionals = {key: _lookup(raw, key) for key in OPTIONAL_KEYS}
    if any(value is not None and not isinstance(value, str) for value in optionals.values()):
        return None

    return ProcedureEntry(
        id=optionals['id'],
        tooth=tooth,
        face=optionals['face'],
        type=type_,
        note=optionals['note'],
        occurred_at=optionals['occurredAt'],
    )


def _candidates(raw) -> list:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        if PROCEDURES_KEY in raw:
            value = raw[PROCEDURES_KEY]
        else:
            value = raw.get(LEGACY_PROCEDURES_KEY)
        if isinstance(value, list):
            return value
    return []


def decode(raw) -> DecodeResult:
    """
    Decodifica uma lista de procedimentos ou um documento que a contenha.

    Aceita a lista pura, {"procedures": [...]} ou o formato antigo
    {"procedimentos": [...]}. Qualquer outra coisa vira lista vazia.
    A ordem das entradas válidas é preservada.
    """
    candidates = _candidates(raw)
    entries = []
    for candidate in candidates:
        entry = _decode_entry(candidate)
        if entry is not None:
            entries.append(entry)
    return DecodeResult(entries=entries, dropped=len(candidates) - len(entries))


def decode_many(raw) -> List[ProcedureEntry]:
    return decode(raw).entries


def encode_entry(entry: ProcedureEntry) -> dict:
    return {
        'id': entry.id,
        'tooth': entry.tooth,
        'face': entry.face,
        'type': entry.type,
        'note': entry.note,
        'occurredAt': entry.occurred_at,
    }


def encode(entries) -> dict:
    """Documento completo, com todas as chaves presentes em cada entrada"""
    return {PROCEDURES_KEY: [encode_entry(entry) for entry in entries]}
