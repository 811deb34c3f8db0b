"""
Configuración centralizada de Logging y Métricas.

Principios SRE:
1. Logs legibles para humanos (Consola).
2. Logs detallados para forense (Archivo, opcional).
3. Eventos estructurados (JSON) con Correlation ID, latencia y RAM.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Optional

import psutil

from common_helpers.modules.file_io.infrastructure.config import FileIoSettings

logger = logging.getLogger("common_helpers")


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """
    Configura el logging con consola y, si se indica, archivo.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Evitar handlers duplicados si se llama más de una vez
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        logging.debug(f"🔭 Observabilidad iniciada. Logs persistentes en: {log_file}")


def configure_from_settings(settings: FileIoSettings) -> None:
    configure_logging(level=settings.logging_level, log_file=settings.log_file)
    ObservabilityService.PRETTY_PRINT = settings.pretty_logs


# === Decoradores de Métricas (Instrumentation) ===


def measure_time(metric_name: str):
    """
    Decorador para medir latencia de operaciones de disco.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start_time
                logging.getLogger("metrics").debug(
                    f"[METRIC] {metric_name} duration={duration:.4f}s"
                )

        return wrapper

    return decorator


class ObservabilityService:
    """
    Eventos estructurados para casos de uso: latencia y saturación (RAM).
    """

    # Vista vertical (indentada) cuando LOG_FORMAT=PRETTY
    PRETTY_PRINT = FileIoSettings.from_env().pretty_logs

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON."""
        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4)
        else:
            msg = json.dumps(log_entry)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def _target_of(args: tuple) -> str:
        # El primer argumento ruta (Path o str) identifica el objetivo
        for arg in args:
            if isinstance(arg, Path):
                return arg.name
            if isinstance(arg, str):
                return os.path.basename(os.path.normpath(arg)) or arg
        return "unknown"

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                target = ObservabilityService._target_of(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    crash_ram = ObservabilityService._get_ram_usage_mb()
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.time() - start_time, 3),
                            "crash_ram_mb": crash_ram,
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.time() - start_time, 3),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator
