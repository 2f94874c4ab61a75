"""
Excepciones de dominio del proyecto payment-file-parser.

Jerarquía:
    PaymentParserError
    ├── ValidationError             → El archivo no pasa la validación
    │   ├── RecordSyntaxError       → Longitud de línea o campo con sintaxis inválida
    │   └── RecordSemanticError     → Conteo, suma, fecha o moneda inconsistentes
    └── OutputError                 → Error al generar el archivo de salida

Un archivo cuyo nombre no corresponde a ningún formato NO es un error:
los procesadores devuelven False y el archivo se considera "no manejado".
Los errores de lectura (OSError) se propagan sin envolver.
"""


class PaymentParserError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class ValidationError(PaymentParserError):
    """Un archivo de pagos no pasó la validación.

    Siempre es fatal para el archivo completo: no hay recuperación parcial
    ni acumulación de errores. Se lanza con la primera violación encontrada.
    """

    def __init__(self, detalle: str, offset: int):
        self.detalle = detalle
        self.offset = offset
        super().__init__(f"{detalle} (columna {offset})")


class RecordSyntaxError(ValidationError):
    """Una línea tiene longitud inválida o un campo no cumple su patrón.

    Ejemplos:
    - La línea de apertura de Betalningsservice no mide 51 caracteres.
    - El monto de un pago contiene letras.
    - El tipo de registro no es el literal esperado ('B', '30', ...).
    """

    def __init__(self, record_type: str, detalle: str, offset: int, texto: str = ""):
        self.record_type = record_type
        self.texto = texto
        mensaje = detalle
        if texto:
            mensaje += f": '{texto}'"
        super().__init__(mensaje, offset)


class RecordSemanticError(ValidationError):
    """Los registros son sintácticamente válidos pero inconsistentes entre sí.

    Ejemplos:
    - El conteo declarado no coincide con el número de líneas de pago.
    - La suma declarada no coincide con la suma exacta de los montos.
    - La fecha no existe en el calendario (20240230).
    - La moneda está en blanco.

    El offset apunta al campo declarado (el que se considera autoritativo).
    """


class OutputError(PaymentParserError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - No hay lotes que exportar.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
