"""
Configuración del módulo File I/O.

Arquitectura: Infrastructure
Responsabilidad: Leer variables de entorno UNA vez y pasarlas como parámetro
explícito a quien las necesite (adaptador, logging).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

# Variables de entorno reconocidas
ENV_OS_OVERRIDE = "TEST_OS_OVERRIDE"
ENV_LOG_FORMAT = "LOG_FORMAT"
ENV_LOG_FILE = "COMMON_HELPERS_LOG_FILE"
ENV_LOG_LEVEL = "COMMON_HELPERS_LOG_LEVEL"


@dataclass(frozen=True)
class FileIoSettings:
    os_override: Optional[str] = None
    log_format: str = "JSON"
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> FileIoSettings:
        """Construye la configuración desde `os.environ` (o el mapping dado)."""
        env = os.environ if environ is None else environ
        return cls(
            os_override=env.get(ENV_OS_OVERRIDE) or None,
            log_format=(env.get(ENV_LOG_FORMAT) or "JSON").upper(),
            log_file=env.get(ENV_LOG_FILE) or None,
            log_level=(env.get(ENV_LOG_LEVEL) or "INFO").upper(),
        )

    @property
    def pretty_logs(self) -> bool:
        return self.log_format == "PRETTY"

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO
