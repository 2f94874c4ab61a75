"""
Modelo de dominio: Lote de pagos completo.

Agrupa lo que un receptor recibió entre start_payment_bundle() y
end_payment_bundle(). Lo PRODUCE el MemoryPaymentReceiver y lo CONSUME
el OutputWriter (Excel) y el CLI para la bitácora.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.info_lote import InfoLote
from src.domain.models.pago import Pago
from src.domain.shared.amounts import sum_amounts


@dataclass(frozen=True)
class LotePagos:
    """Lote de pagos con su cabecera."""

    info: InfoLote
    """Cabecera del lote (cuenta, fecha, moneda)."""

    pagos: tuple[Pago, ...]
    """Pagos en el orden del archivo."""

    archivo_origen: str = ""
    """Nombre del archivo del que salió el lote. Para trazabilidad."""

    @property
    def num_pagos(self) -> int:
        """Cantidad de pagos del lote."""
        return len(self.pagos)

    @property
    def total(self) -> Decimal:
        """Suma exacta de los montos del lote."""
        return sum_amounts(p.amount for p in self.pagos)
