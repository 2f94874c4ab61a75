"""
Tests para el registro de procesadores y la configuración por defecto.
"""

import pytest

from src.adapters.input.payment_processors.betalningsservice_processor import (
    BetalningsserviceProcessor,
)
from src.adapters.input.payment_processors.inbetalningstjansten_processor import (
    InbetalningstjanstenProcessor,
)
from src.domain.services.multi_type_processor import MultiTypePaymentFileProcessor
from src.infrastructure.registry import (
    PaymentProcessorRegistry,
    create_default_processor,
    create_default_registry,
)


class TestPaymentProcessorRegistry:

    def test_registro_por_defecto_en_orden(self):
        registry = create_default_registry()
        assert registry.available_formats == ["BETALNINGSSERVICE", "INBETALNINGSTJANSTEN"]
        assert len(registry) == 2

    def test_get_case_insensitive(self):
        registry = create_default_registry()
        assert isinstance(registry.get("betalningsservice"), BetalningsserviceProcessor)
        assert registry.get("BGMAX") is None

    def test_nombre_duplicado_lanza_error(self):
        registry = PaymentProcessorRegistry()
        registry.register(BetalningsserviceProcessor())
        with pytest.raises(ValueError, match="Ya existe"):
            registry.register(BetalningsserviceProcessor())

    def test_processors_devuelve_copia(self):
        registry = PaymentProcessorRegistry()
        registry.processors.append(InbetalningstjanstenProcessor())
        assert len(registry) == 0

    def test_procesador_por_defecto(self):
        processor = create_default_processor()
        assert isinstance(processor, MultiTypePaymentFileProcessor)
        assert [p.name for p in processor.processors] == [
            "BETALNINGSSERVICE",
            "INBETALNINGSTJANSTEN",
        ]

    def test_sufijos_mutuamente_excluyentes(self):
        """Precondición de configuración: ningún sufijo termina en otro."""
        sufijos = [p.filename_suffix for p in create_default_registry().processors]
        for a in sufijos:
            for b in sufijos:
                if a != b:
                    assert not a.endswith(b)
