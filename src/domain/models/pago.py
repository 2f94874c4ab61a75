"""
Modelo de dominio: Pago individual.

Corresponde a una línea de pago del archivo y a una llamada a
PaymentReceiver.payment(). El monto es siempre Decimal: la suma de los
pagos se compara de forma EXACTA contra el total declarado.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Pago:
    """Un pago de un lote."""

    amount: Decimal
    """Monto del pago. Betalningsservice lo trae con coma decimal,
    Inbetalningstjänsten en centavos (öre) y se divide entre 100."""

    reference: str
    """Referencia tal como viene en el archivo, de ancho fijo.
    NO se recorta: puede terminar en espacios."""

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(f"amount debe ser Decimal, recibió {type(self.amount).__name__}")
        if self.amount < Decimal("0"):
            raise ValueError(f"El monto no puede ser negativo: {self.amount}")
