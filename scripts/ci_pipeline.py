#!/usr/bin/env python3
"""
Pipeline de CI Local para Common Helpers.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time

# (nombre, comando, bloqueante)
STAGES = [
    ("Lint", "ruff check src/ tests/", False),
    ("Tipos (domain + core)", "mypy src/common_helpers/modules/file_io/domain "
     "src/common_helpers/core --ignore-missing-imports", True),
    ("Tests", "pytest -q", True),
]


def main() -> int:
    for name, command, blocking in STAGES:
        print(f"\n=== {name} ===")
        start = time.time()
        result = subprocess.run(command, shell=True)
        duration = time.time() - start

        if result.returncode == 0:
            print(f"✅ {name} ({duration:.2f}s)")
        elif blocking:
            print(f"⛔ {name} falló ({duration:.2f}s)")
            return result.returncode
        else:
            print(f"⚠️  {name}: advertencias (no bloqueante)")

    print("\n🎉 BUILD SUCCESSFUL")
    return 0


if __name__ == "__main__":
    sys.exit(main())
