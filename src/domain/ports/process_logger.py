"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar los EVENTOS de negocio durante el
procesamiento de archivos de pagos:
- "Se recibió un archivo"
- "Ningún formato reconoce el archivo"
- "El archivo fue procesado como Betalningsservice"

La implementación puede imprimir a consola, escribir con `logging` o
acumular en memoria para los tests; el dominio solo conoce los eventos.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    @abstractmethod
    def log_file_received(self, file_path: Path) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que ningún procesador manejó el archivo.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Ningún formato reconoce el nombre"
        """
        ...

    @abstractmethod
    def log_processor_selected(self, file_path: Path, processor_name: str) -> None:
        """Registra qué procesador manejó el archivo."""
        ...

    @abstractmethod
    def log_bundle_complete(
        self,
        file_path: Path,
        account_number: str,
        num_pagos: int,
        total: Decimal,
    ) -> None:
        """Registra un lote completo (ya validado y emitido).

        Args:
            file_path: Archivo de origen.
            account_number: Cuenta del lote.
            num_pagos: Cantidad de pagos emitidos.
            total: Suma exacta de los montos.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error de validación o de lectura de un archivo."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_pagos': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
