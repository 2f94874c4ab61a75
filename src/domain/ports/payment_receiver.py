"""
Puerto de salida: Receptor de pagos.

Define el contrato de quien recibe los eventos normalizados de un archivo
de pagos. Los procesadores de formato lo invocan siempre en este orden:

    start_payment_bundle(...)  →  payment(...) * N  →  end_payment_bundle()

Cualquier otro orden es inválido. Los procesadores nunca construyen un
receptor: lo reciben del llamador, así que se puede sustituir por uno de
consola, uno en memoria o uno de pruebas sin tocar los procesadores.

Implementaciones:
    PaymentReceiver (interfaz)
    ├── ConsolePaymentReceiver   → imprime los eventos
    └── MemoryPaymentReceiver    → acumula LotePagos (para Excel / tests)
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal


class PaymentReceiver(ABC):
    """Interfaz para recibir los pagos de un archivo."""

    @abstractmethod
    def start_payment_bundle(
        self,
        account_number: str,
        payment_date: date | None,
        currency: str | None,
    ) -> None:
        """Inicia un lote de pagos.

        Args:
            account_number: Cuenta destino, con ceros iniciales.
            payment_date: Fecha de pago. None si el formato no la trae.
            currency: Código de moneda. None si el formato no la trae.
        """
        ...

    @abstractmethod
    def payment(self, amount: Decimal, reference: str) -> None:
        """Registra un pago del lote actual.

        Args:
            amount: Monto exacto.
            reference: Referencia de ancho fijo, sin recortar.
        """
        ...

    @abstractmethod
    def end_payment_bundle(self) -> None:
        """Cierra el lote actual."""
        ...
