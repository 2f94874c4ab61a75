"""
Registro de procesadores de formato disponibles.

Centraliza la lista ORDENADA de procesadores que usa el
MultiTypePaymentFileProcessor. Agregar un nuevo formato al sistema
requiere solo 2 pasos:
1. Crear la clase XxxProcessor que implemente PaymentFileProcessor.
2. Registrarla aquí con register() o agregarla a create_default_registry().

Precondición (no verificada): los sufijos de nombre de archivo de los
procesadores registrados deben ser mutuamente excluyentes.
"""

from src.domain.ports.payment_file_processor import PaymentFileProcessor
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.multi_type_processor import MultiTypePaymentFileProcessor


class PaymentProcessorRegistry:
    """Registro ordenado de procesadores de formato."""

    def __init__(self) -> None:
        self._processors: list[PaymentFileProcessor] = []

    def register(self, processor: PaymentFileProcessor) -> None:
        """Registra un procesador al final de la lista.

        Args:
            processor: Instancia de un PaymentFileProcessor concreto.

        Raises:
            ValueError: Si ya existe un procesador con el mismo nombre.
        """
        name = processor.name.upper()
        for registrado in self._processors:
            if registrado.name.upper() == name:
                raise ValueError(
                    f"Ya existe un procesador registrado para '{name}': "
                    f"{type(registrado).__name__}. "
                    f"No se puede registrar {type(processor).__name__}."
                )
        self._processors.append(processor)

    def get(self, name: str) -> PaymentFileProcessor | None:
        """Obtiene un procesador por nombre (case-insensitive)."""
        for processor in self._processors:
            if processor.name.upper() == name.upper():
                return processor
        return None

    @property
    def processors(self) -> list[PaymentFileProcessor]:
        """Procesadores en orden de registro."""
        return list(self._processors)

    @property
    def available_formats(self) -> list[str]:
        """Nombres de los formatos disponibles, en orden de registro."""
        return [p.name for p in self._processors]

    def __len__(self) -> int:
        return len(self._processors)


def create_default_registry() -> PaymentProcessorRegistry:
    """Crea un registro con todos los formatos soportados.

    Returns:
        PaymentProcessorRegistry con Betalningsservice e Inbetalningstjänsten.
    """
    registry = PaymentProcessorRegistry()

    from src.adapters.input.payment_processors.betalningsservice_processor import (
        BetalningsserviceProcessor,
    )

    registry.register(BetalningsserviceProcessor())

    from src.adapters.input.payment_processors.inbetalningstjansten_processor import (
        InbetalningstjanstenProcessor,
    )

    registry.register(InbetalningstjanstenProcessor())

    return registry


def create_default_processor(
    logger: ProcessLogger | None = None,
) -> MultiTypePaymentFileProcessor:
    """Crea el procesador multi-formato con los formatos por defecto."""
    return MultiTypePaymentFileProcessor(create_default_registry().processors, logger=logger)
