"""
Guardas de validación de entradas.

Arquitectura: Modular Monolith
Capa: Core (Building Block)
Responsabilidad: Validar precondiciones (nulo, vacío, falso) antes de llamar
a otras capas. Las funciones `empty_or_nil*` e `is_false` DEVUELVEN el error
(o None); `fail_on_empty_or_nil` lo lanza.
"""

from __future__ import annotations

from typing import Any, Optional

from .reflection import is_nil_or_empty


class GuardError(ValueError):
    """Una precondición sobre un valor de entrada no se cumple."""

    pass


def _type_name(value: Any) -> str:
    return type(value).__name__


def is_nil(value: Any) -> bool:
    """Solo None es nulo: "", 0, False o una dataclass vacía NO lo son."""
    return value is None


def empty_or_nil(value: Any, name: Optional[str] = None) -> Optional[GuardError]:
    """Retorna un GuardError si el valor es None o vacío."""
    if not is_nil_or_empty(value):
        return None

    if name:
        return GuardError(
            f"El valor {name} de tipo {_type_name(value)} no puede ser nulo o vacío"
        )
    return GuardError(f"El valor {_type_name(value)} no puede ser nulo o vacío")


def fail_on_empty_or_nil(value: Any, name: Optional[str] = None) -> None:
    """Igual que `empty_or_nil`, pero lanza el error en vez de devolverlo."""
    error = empty_or_nil(value, name)
    if error is not None:
        raise error


def empty_or_nil_with_message(value: Any, message: str) -> Optional[GuardError]:
    if is_nil_or_empty(value):
        return GuardError(message)
    return None


def is_false(value: bool, name: Optional[str] = None) -> Optional[GuardError]:
    """Retorna un GuardError si el valor es False."""
    if value:
        return None
    return GuardError(f"El valor {name or _type_name(value)} no puede ser falso")
