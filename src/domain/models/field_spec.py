"""
Modelo de dominio: Especificación de un campo posicional.

Los archivos de pagos son de ancho fijo: cada campo ocupa un rango de
columnas [start, end) de la línea y debe cumplir un patrón. Un FieldSpec
describe una de esas columnas tal como aparece en la tabla del formato.

Ejemplo (Betalningsservice, línea de apertura):
    FieldSpec(40, 48, r"\\d{8}", "date")  → la fecha ocupa las columnas 40-47.
"""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldSpec:
    """Rango de columnas semiabierto [start, end) con su patrón."""

    start: int
    """Columna inicial (incluida, base 0). Es el offset que se reporta
    cuando el campo no pasa la validación."""

    end: int
    """Columna final (excluida). La línea debe medir al menos `end`."""

    pattern: str
    """Expresión regular que debe cumplir el campo COMPLETO (fullmatch)."""

    name: str
    """Nombre legible del campo para los mensajes de error
    ('account number', 'sum', 'reference', ...)."""

    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start no puede ser negativo: {self.start}")
        if self.end <= self.start:
            raise ValueError(
                f"end ({self.end}) debe ser mayor que start ({self.start}) "
                f"en el campo '{self.name}'"
            )
        # \d y \s solo ASCII: un NBSP (0xA0 en ISO-8859-1) no es espacio válido.
        object.__setattr__(self, "_regex", re.compile(self.pattern, re.ASCII))

    @property
    def width(self) -> int:
        """Ancho del campo en caracteres."""
        return self.end - self.start

    def extract(self, line: str) -> str:
        """Devuelve el texto crudo del campo (sin recortar espacios)."""
        return line[self.start : self.end]

    def matches(self, line: str) -> bool:
        """True si el texto del campo cumple el patrón completo."""
        return self._regex.fullmatch(self.extract(line)) is not None
