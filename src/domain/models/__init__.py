"""
Modelos de dominio del proyecto payment-file-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import FieldSpec, InfoLote, Pago, LotePagos
"""

from src.domain.models.field_spec import FieldSpec
from src.domain.models.info_lote import InfoLote
from src.domain.models.lote_pagos import LotePagos
from src.domain.models.pago import Pago

__all__ = [
    "FieldSpec",
    "InfoLote",
    "LotePagos",
    "Pago",
]
