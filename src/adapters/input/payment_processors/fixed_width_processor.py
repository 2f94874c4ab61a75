"""
Base común de los procesadores de archivos de ancho fijo.

Todos los formatos siguen el mismo flujo, en este orden estricto:

    1. ¿El nombre termina en el sufijo del formato?  No → False (sin leer).
    2. Leer TODAS las líneas (ISO-8859-1).
    3. Validación sintáctica de todas las líneas.
    4. Validación semántica (conteos, sumas, fechas...).
    5. Parseo a InfoLote + Pagos.
    6. Emisión al receptor: start → payment * N → end.

Como la emisión ocurre después de las dos validaciones, un archivo
inválido nunca produce eventos parciales en el receptor.

Cada formato concreto solo define su sufijo y los pasos 3-5.
"""

from abc import abstractmethod
from pathlib import Path

from src.domain.models.info_lote import InfoLote
from src.domain.models.pago import Pago
from src.domain.ports.payment_file_processor import PaymentFileProcessor
from src.domain.ports.payment_receiver import PaymentReceiver
from src.domain.shared.file_reader import read_lines


class FixedWidthPaymentFileProcessor(PaymentFileProcessor):
    """Procesador de un formato de ancho fijo identificado por sufijo."""

    filename_suffix: str = ""

    def accepts(self, file_path: Path) -> bool:
        """True si el nombre del archivo corresponde a este formato."""
        return str(file_path).endswith(self.filename_suffix)

    def process_file(self, file_path: Path, receiver: PaymentReceiver) -> bool:
        if file_path is None:
            raise ValueError("El archivo no puede ser None.")
        if not self.accepts(file_path):
            return False
        if receiver is None:
            raise ValueError("El receptor de pagos no puede ser None.")

        lines = read_lines(Path(file_path))
        self.validate_syntax(lines)
        self.validate_semantics(lines)
        info, pagos = self.parse(lines)

        receiver.start_payment_bundle(info.account_number, info.payment_date, info.currency)
        for pago in pagos:
            receiver.payment(pago.amount, pago.reference)
        receiver.end_payment_bundle()
        return True

    @abstractmethod
    def validate_syntax(self, lines: list[str]) -> None:
        """Valida cantidad de líneas, longitudes y patrones de campo.

        Raises:
            RecordSyntaxError: Con la primera violación encontrada.
        """
        ...

    @abstractmethod
    def validate_semantics(self, lines: list[str]) -> None:
        """Valida la consistencia entre registros. Supone sintaxis válida.

        Raises:
            RecordSemanticError: Con la primera inconsistencia encontrada.
        """
        ...

    @abstractmethod
    def parse(self, lines: list[str]) -> tuple[InfoLote, list[Pago]]:
        """Convierte las líneas ya validadas en cabecera y pagos."""
        ...
