"""
Utilidades compartidas del dominio.

Estas funciones son usadas por los procesadores de ambos formatos y no
dependen de ninguna librería externa. Solo operan sobre tipos nativos de Python.

Uso:
    from src.domain.shared.amounts import parse_comma_decimal, parse_minor_units
    from src.domain.shared.date_parser import parse_compact_date
    from src.domain.shared.field_validator import validate_field, validate_length
    from src.domain.shared.file_reader import read_lines
"""
