"""
Adaptador de salida: Receptor de pagos en memoria.

Acumula cada lote recibido como un LotePagos. Lo usa el CLI para exportar
a Excel después de procesar los archivos, y los tests para verificar
exactamente qué recibió el receptor.

Es estricto con el orden de las llamadas: payment() o end_payment_bundle()
sin un lote abierto, o start_payment_bundle() con un lote abierto,
lanzan RuntimeError.
"""

from datetime import date
from decimal import Decimal

from src.domain.models.info_lote import InfoLote
from src.domain.models.lote_pagos import LotePagos
from src.domain.models.pago import Pago
from src.domain.ports.payment_receiver import PaymentReceiver


class MemoryPaymentReceiver(PaymentReceiver):
    """Receptor que guarda los lotes recibidos."""

    def __init__(self) -> None:
        self._lotes: list[LotePagos] = []
        self._info_actual: InfoLote | None = None
        self._pagos_actuales: list[Pago] = []
        self._archivo_actual: str = ""
        self._num_eventos: int = 0

    def set_source(self, archivo_origen: str) -> None:
        """Nombre del archivo que se asociará a los siguientes lotes."""
        self._archivo_actual = archivo_origen

    def start_payment_bundle(
        self,
        account_number: str,
        payment_date: date | None,
        currency: str | None,
    ) -> None:
        if self._info_actual is not None:
            raise RuntimeError("start_payment_bundle() llamado con un lote ya abierto")
        self._num_eventos += 1
        self._info_actual = InfoLote(
            account_number=account_number,
            payment_date=payment_date,
            currency=currency,
        )
        self._pagos_actuales = []

    def payment(self, amount: Decimal, reference: str) -> None:
        if self._info_actual is None:
            raise RuntimeError("payment() llamado sin un lote abierto")
        self._num_eventos += 1
        self._pagos_actuales.append(Pago(amount=amount, reference=reference))

    def end_payment_bundle(self) -> None:
        if self._info_actual is None:
            raise RuntimeError("end_payment_bundle() llamado sin un lote abierto")
        self._num_eventos += 1
        self._lotes.append(
            LotePagos(
                info=self._info_actual,
                pagos=tuple(self._pagos_actuales),
                archivo_origen=self._archivo_actual,
            )
        )
        self._info_actual = None
        self._pagos_actuales = []

    @property
    def lotes(self) -> list[LotePagos]:
        """Lotes cerrados, en el orden en que se recibieron."""
        return list(self._lotes)

    @property
    def num_eventos(self) -> int:
        """Total de llamadas recibidas (start + payment + end)."""
        return self._num_eventos

    @property
    def lote_abierto(self) -> bool:
        """True si hay un lote iniciado y no cerrado."""
        return self._info_actual is not None
