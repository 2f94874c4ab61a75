"""
Conversión de fechas de los archivos de pagos.

Betalningsservice trae la fecha de pago como 8 dígitos compactos
(AAAAMMDD). La validación sintáctica solo garantiza los 8 dígitos; aquí
se comprueba que la fecha exista en el calendario. No hay interpretación
"indulgente": 20241301 o 20240230 son inválidas, no se desbordan al mes
siguiente.
"""

from datetime import date


def parse_compact_date(date_text: str) -> date:
    """Parsea una fecha AAAAMMDD a un objeto date.

    Args:
        date_text: Texto de 8 dígitos.

    Returns:
        Objeto date de Python.

    Raises:
        ValueError: Si no son 8 dígitos o la fecha no existe.

    Ejemplos:
        >>> parse_compact_date("20240115")
        datetime.date(2024, 1, 15)
    """
    text = date_text.strip()

    if len(text) != 8 or not text.isdigit():
        raise ValueError(f"Formato de fecha no reconocido: '{date_text}'. Esperado: AAAAMMDD")

    año, mes, dia = int(text[0:4]), int(text[4:6]), int(text[6:8])

    try:
        return date(año, mes, dia)
    except ValueError as e:
        raise ValueError(f"Fecha inválida '{date_text}': {e}")
