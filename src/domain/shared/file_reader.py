"""
Lectura de archivos de pagos.

Los archivos son de un solo byte por carácter (ISO-8859-1). Decodificar con
otra codificación (UTF-8, cp1252 con bytes indefinidos) movería o rompería
los offsets de columna, así que la codificación es fija.

Los errores de E/S (archivo inexistente, permisos) se propagan como OSError.
"""

from pathlib import Path

ENCODING = "latin-1"


def read_lines(file_path: Path) -> list[str]:
    """Lee todas las líneas del archivo, sin los terminadores de línea.

    Acepta '\\n', '\\r\\n' y '\\r' como fin de línea. Un terminador al final
    del archivo no produce una línea vacía extra; las líneas vacías
    intermedias sí se conservan (y fallarán la validación de longitud).

    Raises:
        OSError: Si el archivo no se puede leer.
    """
    with open(file_path, encoding=ENCODING, newline=None) as f:
        contenido = f.read()

    lineas = contenido.split("\n")
    if lineas and lineas[-1] == "":
        lineas.pop()
    return lineas
