"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout de 2 hojas:
- Hoja 1 (Resumen): una fila por lote con cuenta, fecha, moneda, total
  y cantidad de pagos.
- Hoja 2 (Pagos): detalle de cada pago con su lote.

Los montos se escriben como float SOLO en la hoja de cálculo; la validación
y las sumas del dominio ya se hicieron con Decimal.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.lote_pagos import LotePagos
from src.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_single(self, lote: LotePagos, output_path: Path) -> Path:
        """Escribe un solo lote de pagos a Excel.

        Args:
            lote: Lote de pagos de un archivo.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        return self._write([lote], output_path)

    def write_consolidated(self, lotes: list[LotePagos], output_path: Path) -> Path:
        """Escribe todos los lotes en un solo archivo (mismas 2 hojas)."""
        if not lotes:
            raise OutputError(str(output_path), "No hay lotes para consolidar")
        return self._write(lotes, output_path)

    def _write(self, lotes: list[LotePagos], output_path: Path) -> Path:
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(lotes, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS: Generación del Excel
    # =================================================================

    @staticmethod
    def _filas_resumen(lotes: list[LotePagos]) -> list[dict]:
        return [
            {
                "Cuenta": lote.info.account_number,
                "Fecha": _formatear_fecha(lote),
                "Moneda": lote.info.currency or "",
                "Total": float(lote.total),
                "Num Pagos": lote.num_pagos,
                "Archivo": lote.archivo_origen,
            }
            for lote in lotes
        ]

    @staticmethod
    def _filas_pagos(lotes: list[LotePagos]) -> list[dict]:
        filas = []
        for lote in lotes:
            for pago in lote.pagos:
                filas.append(
                    {
                        "Cuenta": lote.info.account_number,
                        "Fecha": _formatear_fecha(lote),
                        "Moneda": lote.info.currency or "",
                        "Monto": float(pago.amount),
                        "Referencia": pago.reference,
                    }
                )
        return filas

    def _escribir_excel(self, lotes: list[LotePagos], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        df_resumen = pd.DataFrame(
            self._filas_resumen(lotes),
            columns=["Cuenta", "Fecha", "Moneda", "Total", "Num Pagos", "Archivo"],
        )
        df_pagos = pd.DataFrame(
            self._filas_pagos(lotes),
            columns=["Cuenta", "Fecha", "Moneda", "Monto", "Referencia"],
        )

        # --- Escribir Excel con xlsxwriter ---
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_pagos.to_excel(writer, index=False, sheet_name="Pagos")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_pagos = writer.sheets["Pagos"]

            # Formato para texto (mantener ceros iniciales en cuenta)
            text_format = workbook.add_format({"num_format": "@"})

            # Formato para montos (2 decimales con separador de miles)
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 20, text_format)  # Cuenta
            ws_resumen.set_column("B:B", 12)  # Fecha
            ws_resumen.set_column("C:C", 8)  # Moneda
            ws_resumen.set_column("D:D", 18, money_format)  # Total
            ws_resumen.set_column("E:E", 12)  # Num Pagos
            ws_resumen.set_column("F:F", 40)  # Archivo

            # --- Formato Hoja Pagos ---
            ws_pagos.set_column("A:A", 20, text_format)  # Cuenta
            ws_pagos.set_column("B:B", 12)  # Fecha
            ws_pagos.set_column("C:C", 8)  # Moneda
            ws_pagos.set_column("D:D", 15, money_format)  # Monto
            ws_pagos.set_column("E:E", 40, text_format)  # Referencia


def _formatear_fecha(lote: LotePagos) -> str:
    if lote.info.payment_date is None:
        return ""
    return lote.info.payment_date.strftime("%Y-%m-%d")
