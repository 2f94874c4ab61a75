"""
Servicio de dominio: Procesador multi-formato.

Recibe una lista ORDENADA de procesadores de formato y ofrece cada archivo
a cada uno, en orden, hasta que alguno lo maneje:

1. El procesador revisa el nombre del archivo. Si no le corresponde,
   devuelve False sin leerlo → se prueba el siguiente.
2. Si le corresponde, lo valida y lo parsea completo → se devuelve True.
3. Si ninguno lo maneja → se devuelve False.

Un error de validación o de lectura en el procesador que SÍ reconoció el
archivo se propaga tal cual: no se prueba el siguiente procesador.

Los sufijos de los procesadores deben ser mutuamente excluyentes; es una
precondición de la configuración (ver infrastructure/registry.py).
"""

from collections.abc import Sequence
from pathlib import Path

from src.domain.ports.payment_file_processor import PaymentFileProcessor
from src.domain.ports.payment_receiver import PaymentReceiver
from src.domain.ports.process_logger import ProcessLogger


class MultiTypePaymentFileProcessor(PaymentFileProcessor):
    """Prueba varios procesadores de formato en orden.

    Recibe sus dependencias por constructor. No sabe qué formatos concretos
    existen; solo conoce el puerto PaymentFileProcessor.
    """

    def __init__(
        self,
        processors: Sequence[PaymentFileProcessor],
        logger: ProcessLogger | None = None,
    ) -> None:
        """
        Args:
            processors: Procesadores en orden de prioridad. Puede estar
                        vacía (ningún archivo será manejado).
            logger: Bitácora opcional de eventos de procesamiento.

        Raises:
            ValueError: Si processors es None.
        """
        if processors is None:
            raise ValueError("La lista de procesadores no puede ser None.")

        self._processors = tuple(processors)
        self._logger = logger

    @property
    def name(self) -> str:
        return "MULTI"

    @property
    def processors(self) -> tuple[PaymentFileProcessor, ...]:
        """Procesadores registrados, en el orden en que se prueban."""
        return self._processors

    def process_file(self, file_path: Path, receiver: PaymentReceiver) -> bool:
        if file_path is None:
            raise ValueError("El archivo no puede ser None.")
        if receiver is None:
            raise ValueError("El receptor de pagos no puede ser None.")

        file_path = Path(file_path)
        if self._logger is not None:
            self._logger.log_file_received(file_path)

        for processor in self._processors:
            if processor.process_file(file_path, receiver):
                if self._logger is not None:
                    self._logger.log_processor_selected(file_path, processor.name)
                return True

        if self._logger is not None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún procesador reconoce el nombre '{file_path.name}'",
            )
        return False
