"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Value Objects reusables en CUALQUIER dominio (ChunkSize)
   • Guardas de validación de entradas (nulo, vacío, falso)
   • Helpers de introspección sobre dataclasses (tags, campos)

🚫 ¿Qué NO pertenece aquí?
   • Operaciones de disco, rutas o checksums
     → modules/file_io/

💡 Principio preventivo:
   Nada de core/ importa desde modules/. Si necesitas el sistema de archivos,
   no pertenece aquí.
"""

from .guard import (
    GuardError,
    empty_or_nil,
    empty_or_nil_with_message,
    fail_on_empty_or_nil,
    is_false,
    is_nil,
)
from .reflection import FieldTag, get_field_tag, is_nil_or_empty, parse_tag, remove_field
from .value_objects import ChunkSize

__all__ = [
    "ChunkSize",
    "FieldTag",
    "GuardError",
    "empty_or_nil",
    "empty_or_nil_with_message",
    "fail_on_empty_or_nil",
    "get_field_tag",
    "is_false",
    "is_nil",
    "is_nil_or_empty",
    "parse_tag",
    "remove_field",
]
