"""
Helpers de introspección sobre dataclasses.

Arquitectura: Modular Monolith
Capa: Core (Building Block)
Responsabilidad: Detectar valores "vacíos", leer tags declarados en los
metadatos de un campo y volcar campos a diccionarios.

Formato de tag (en `field(metadata={"tag": ...})`):
    json:"field1,omitempty" xml:"field2"
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

TAG_METADATA_KEY = "tag"


@dataclass
class FieldTag:
    """Un tag parseado: clave, nombre y opciones (sin comillas)."""

    type: str
    name: str
    options: list[str] = field(default_factory=list)


def _is_zero_value(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return not value
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            _is_zero_value(getattr(value, f.name)) for f in dataclasses.fields(value)
        )
    return False


def is_nil_or_empty(value: Any) -> bool:
    """
    True para None, strings vacíos y dataclasses cuyos campos están todos en
    su valor cero. Números y booleanos nunca se consideran vacíos (0 y False
    son valores legítimos).
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _is_zero_value(value)
    return False


def _strip_quotes(text: str) -> str:
    return text.lstrip('"').rstrip('"')


def parse_tag(tag: str, key: str) -> Optional[FieldTag]:
    """
    Busca `key` (sin distinguir mayúsculas) dentro de un string de tags.
    Retorna None si la clave no está presente.
    """
    for entry in tag.split(" "):
        details = entry.split(":")
        if len(details) != 2:
            continue

        tag_key, tag_value = details
        if tag_key.lower() != key.lower():
            continue

        name, *options = tag_value.split(",")
        return FieldTag(
            type=tag_key,
            name=_strip_quotes(name),
            options=[_strip_quotes(option) for option in options],
        )

    return None


def get_field_tag(dataclass_field: dataclasses.Field, key: str) -> Optional[FieldTag]:
    """Lee el tag de un campo de dataclass (metadata["tag"])."""
    tag = dataclass_field.metadata.get(TAG_METADATA_KEY, "")
    return parse_tag(tag, key)


def remove_field(obj: Any, *names: str) -> dict[str, Any]:
    """
    Vuelca los campos de una dataclass a un dict omitiendo `names`
    (comparación insensible a mayúsculas).

    Solo se copian valores int, str, bool o dataclasses anidadas; el resto
    (mapas, listas, floats, None) se descarta.
    """
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"remove_field espera una instancia de dataclass, no {type(obj).__name__}")

    excluded = {name.lower() for name in names}
    result: dict[str, Any] = {}

    for f in dataclasses.fields(obj):
        if f.name.lower() in excluded:
            continue
        value = getattr(obj, f.name)
        if isinstance(value, (int, str)):
            result[f.name] = value
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            result[f.name] = value

    return result
