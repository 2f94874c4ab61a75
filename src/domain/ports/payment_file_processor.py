"""
Puerto de entrada: Procesador de archivos de pagos.

Hay exactamente un procesador por cada formato soportado, más el
procesador multi-formato que los compone:

    PaymentFileProcessor (interfaz)
    ├── BetalningsserviceProcessor      → *_betalningsservice.txt
    ├── InbetalningstjanstenProcessor   → *_inbetalningstjansten.txt
    └── MultiTypePaymentFileProcessor   → prueba los anteriores en orden

Cada procesador decide por el NOMBRE del archivo si le corresponde; el
contenido nunca se inspecciona para elegir formato.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.ports.payment_receiver import PaymentReceiver


class PaymentFileProcessor(ABC):
    """Interfaz para validar y parsear un archivo de pagos."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del procesador. Para la bitácora.

        Ejemplo: 'BETALNINGSSERVICE', 'INBETALNINGSTJANSTEN'
        """
        ...

    @abstractmethod
    def process_file(self, file_path: Path, receiver: PaymentReceiver) -> bool:
        """Valida y parsea el archivo y envía los pagos al receptor.

        Args:
            file_path: Ruta al archivo a procesar.
            receiver: Receptor de los eventos de pago.

        Returns:
            True si este procesador era el adecuado y procesó el archivo.
            False si el archivo no le corresponde (sin leerlo y sin
            llamar al receptor).

        Raises:
            ValueError: Si file_path o receiver son None.
            OSError: Si el archivo no se puede leer.
            ValidationError: Si el archivo no pasa la validación. En ese
                caso el receptor no recibió NINGÚN evento.
        """
        ...
