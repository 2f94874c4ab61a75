"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los lotes de pagos ya parseados en algún
formato persistente (Excel, CSV, etc.). Los procesadores no conocen este
puerto: el CLI acumula los lotes con un MemoryPaymentReceiver y luego los
pasa al escritor.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.lote_pagos import LotePagos


class OutputWriter(ABC):
    """Interfaz para escribir lotes de pagos."""

    @abstractmethod
    def write_single(self, lote: LotePagos, output_path: Path) -> Path:
        """Escribe un solo lote de pagos.

        Args:
            lote: Lote de pagos de un archivo.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(self, lotes: list[LotePagos], output_path: Path) -> Path:
        """Escribe la consolidación de varios lotes en un solo archivo.

        Args:
            lotes: Lotes de pagos, en el orden en que se procesaron.
            output_path: Ruta donde crear el archivo consolidado.

        Returns:
            Ruta real del archivo creado.

        Raises:
            OutputError: Si no hay lotes o falla la escritura.
        """
        ...
