"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y un resumen final.

Útil para:
- Desarrollo y debugging.
- Ejecución manual desde terminal.
"""

from decimal import Decimal
from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger
from src.domain.shared.amounts import format_amount


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._total_pagos: int = 0
        self._errores: list[dict] = []

    def log_file_received(self, file_path: Path) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name}")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name} — {reason}")

    def log_processor_selected(self, file_path: Path, processor_name: str) -> None:
        self._archivos_procesados += 1
        print(f"  🏦 Formato: {processor_name} — {file_path.name}")

    def log_bundle_complete(
        self,
        file_path: Path,
        account_number: str,
        num_pagos: int,
        total: Decimal,
    ) -> None:
        self._total_pagos += num_pagos
        print(
            f"  ✅ Completado: {file_path.name} — cuenta {account_number}, "
            f"{num_pagos} pagos, total {format_amount(total)}"
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name} — {error}")

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "total_pagos": self._total_pagos,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos procesados:  {self._archivos_procesados}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  Total pagos:          {self._total_pagos}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
