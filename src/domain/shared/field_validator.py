"""
Validador de campos posicionales.

Compartido por todos los procesadores de formato. Solo VALIDA: nunca
construye valores de dominio. Ante la primera violación lanza
RecordSyntaxError con el tipo de registro, la columna inicial del campo y
el texto que no cumple el patrón.

Los patrones son compatibles con los layouts reales de los bancos:
se evalúan con fullmatch y con \\d / \\s restringidos a ASCII.
"""

import re

from src.domain.exceptions import RecordSyntaxError
from src.domain.models.field_spec import FieldSpec

# Texto en mayúsculas (incluye Å, Ä, Ö) y dígitos, con relleno de espacios al final.
STRING_PATTERN = r"[A-ZÅÄÖ0-9]* *"

# Entero con relleno de espacios a la izquierda.
INTEGER_PATTERN = r" *\d+"

# Monto con coma decimal opcional, relleno a la izquierda.
DECIMAL_PATTERN = r" *\d+(,\d+)?"

DATE_PATTERN = r"\d{8}"

# Dos grupos de dígitos separados por un espacio: "1234567 89".
ACCOUNT_NUMBER_PATTERN = r"\d+\s\d+\s*"

NUMBER_PATTERN = r"\d+"


def literal(text: str) -> str:
    """Patrón que solo acepta exactamente `text` (tipos de registro)."""
    return re.escape(text)


def validate_length(line: str, expected: int, record_type: str) -> None:
    """Comprueba que la línea mida exactamente `expected` caracteres.

    Raises:
        RecordSyntaxError: Con offset 0 si la longitud no coincide.
    """
    if len(line) != expected:
        raise RecordSyntaxError(
            record_type,
            f"{record_type} post has an invalid length: {len(line)} (expected {expected})",
            0,
        )


def validate_field(line: str, field: FieldSpec, record_type: str) -> None:
    """Comprueba que el campo `field` de la línea cumpla su patrón.

    Args:
        line: Línea completa del archivo (ya validada en longitud).
        field: Especificación del campo.
        record_type: Nombre del registro para el mensaje ('Opening', 'Payment', ...).

    Raises:
        RecordSyntaxError: Con offset = field.start y el texto del campo.
    """
    if len(line) < field.end:
        raise RecordSyntaxError(
            record_type,
            f"{record_type} post is too short for {field.name} "
            f"(needs {field.end} columns, has {len(line)})",
            field.start,
        )
    if not field.matches(line):
        raise RecordSyntaxError(
            record_type,
            f"{record_type} post has invalid {field.name} syntax",
            field.start,
            field.extract(line),
        )


def validate_fields(line: str, fields: list[FieldSpec], record_type: str) -> None:
    """Valida los campos en orden; se detiene en el primero inválido."""
    for field in fields:
        validate_field(line, field, record_type)


def validate_line_count(lines: list[str], minimum: int) -> None:
    """Comprueba que el archivo tenga al menos `minimum` líneas.

    Raises:
        RecordSyntaxError: Con offset 0 si faltan líneas.
    """
    if len(lines) < minimum:
        raise RecordSyntaxError(
            "File",
            f"The input file does not contain at least {minimum} lines ({len(lines)} found)",
            0,
        )
