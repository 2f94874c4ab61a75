"""
Modelo de dominio: Información de un lote de pagos.

Es lo que recibe el PaymentReceiver en start_payment_bundle(). Se construye
a partir de la línea de apertura del archivo:

- Betalningsservice: cuenta, fecha de pago y moneda.
- Inbetalningstjänsten: solo "clearing + ' ' + cuenta". Este formato no
  trae fecha ni moneda, por eso ambos campos son opcionales.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class InfoLote:
    """Datos de cabecera de un lote de pagos."""

    account_number: str
    """Número de cuenta. String (no int) para conservar ceros iniciales y
    el espacio que separa clearing y cuenta (ej: '1234 0000567890')."""

    payment_date: date | None = None
    """Fecha de pago. None si el formato no la incluye."""

    currency: str | None = None
    """Código de moneda ('SEK'). None si el formato no la incluye."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not self.account_number:
            raise ValueError("El número de cuenta no puede estar vacío")
        if self.currency is not None and not self.currency.strip():
            raise ValueError("La moneda no puede estar en blanco (usar None si no aplica)")
