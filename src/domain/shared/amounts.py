"""
Utilidades para manejo de montos de los archivos de pagos.

Los dos formatos representan los montos de forma distinta:

- Betalningsservice: texto con coma decimal, rellenado con espacios a la
  izquierda: "   3000,00" → Decimal("3000.00").
- Inbetalningstjänsten: entero en unidades menores (öre), con ceros a la
  izquierda: "00000000000000001000" → Decimal("10.00").

Siempre se devuelve Decimal. Las sumas se comparan con igualdad exacta
(Decimal("30.00") == Decimal("30")), nunca con tolerancia de float.
"""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation, localcontext

# Suficiente para sumar miles de montos de 20 dígitos sin redondeo.
_SUM_PRECISION = 60


def parse_comma_decimal(text: str) -> Decimal:
    """Convierte un monto con coma decimal a Decimal.

    Args:
        text: Texto del campo, posiblemente con espacios alrededor.

    Returns:
        Decimal con el valor exacto.

    Raises:
        ValueError: Si el texto no es un monto válido.

    Ejemplos:
        >>> parse_comma_decimal("   3000,00")
        Decimal('3000.00')
        >>> parse_comma_decimal("42")
        Decimal('42')
    """
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        raise ValueError("El texto del monto está vacío")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}'")


def parse_minor_units(text: str) -> Decimal:
    """Convierte un entero en unidades menores (öre/centavos) a Decimal con 2 decimales.

    Ejemplos:
        >>> parse_minor_units("00000000000000001000")
        Decimal('10.00')
        >>> parse_minor_units("5")
        Decimal('0.05')
    """
    cleaned = text.strip()
    if not cleaned.isdigit():
        raise ValueError(f"No se pudo convertir a unidades menores: '{text}'")
    return Decimal(cleaned).scaleb(-2)


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Suma exacta de montos.

    Una lista vacía suma Decimal("0").
    """
    with localcontext() as ctx:
        ctx.prec = _SUM_PRECISION
        total = Decimal("0")
        for amount in amounts:
            total += amount
    return total


def format_amount(amount: Decimal) -> str:
    """Formatea un monto para la bitácora y la consola.

    Ejemplos:
        >>> format_amount(Decimal("1234567.8"))
        '1,234,567.80'
        >>> format_amount(Decimal("0"))
        '0.00'
    """
    return f"{amount.quantize(Decimal('0.01')):,.2f}"
