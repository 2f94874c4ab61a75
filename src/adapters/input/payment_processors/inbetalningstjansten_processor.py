"""
Procesador de archivos Inbetalningstjänsten.

ESTRUCTURA DEL ARCHIVO (*_inbetalningstjansten.txt), todas las líneas de 80 columnas:
- Línea 0: registro de apertura ('00').
- Líneas 1..N-2: registros de pago ('30').
- Última línea: registro de cierre ('99').

Apertura:
    0-2    '00'
    10-14  número de clearing   "1234"
    14-24  número de cuenta     "0000567890"

Pago:
    2-22   monto en öre         "00000000000000001000"  → 10.00
    40-65  referencia           25 caracteres, se entrega sin recortar

Cierre:
    2-22   suma declarada en öre
    30-38  cantidad de pagos    "00000001"

Este formato no trae fecha ni moneda: el lote se inicia con ambos en None.
La cuenta se entrega como "clearing cuenta", conservando los ceros iniciales.
"""

from src.adapters.input.payment_processors.fixed_width_processor import (
    FixedWidthPaymentFileProcessor,
)
from src.domain.exceptions import RecordSemanticError
from src.domain.models.field_spec import FieldSpec
from src.domain.models.info_lote import InfoLote
from src.domain.models.pago import Pago
from src.domain.shared.amounts import parse_minor_units, sum_amounts
from src.domain.shared.field_validator import (
    NUMBER_PATTERN,
    STRING_PATTERN,
    literal,
    validate_fields,
    validate_length,
    validate_line_count,
)

LINE_LENGTH = 80

OPENING_TYPE = FieldSpec(0, 2, literal("00"), "type")
CLEARING_NUMBER = FieldSpec(10, 14, NUMBER_PATTERN, "clearing number")
ACCOUNT_NUMBER = FieldSpec(14, 24, NUMBER_PATTERN, "account number")

PAYMENT_TYPE = FieldSpec(0, 2, literal("30"), "type")
AMOUNT = FieldSpec(2, 22, NUMBER_PATTERN, "amount")
REFERENCE = FieldSpec(40, 65, STRING_PATTERN, "reference")

CLOSING_TYPE = FieldSpec(0, 2, literal("99"), "type")
CLOSING_SUM = FieldSpec(2, 22, NUMBER_PATTERN, "sum")
CLOSING_COUNT = FieldSpec(30, 38, NUMBER_PATTERN, "count")

OPENING_FIELDS = [OPENING_TYPE, CLEARING_NUMBER, ACCOUNT_NUMBER]
PAYMENT_FIELDS = [PAYMENT_TYPE, AMOUNT, REFERENCE]
CLOSING_FIELDS = [CLOSING_TYPE, CLOSING_SUM, CLOSING_COUNT]


class InbetalningstjanstenProcessor(FixedWidthPaymentFileProcessor):
    """Procesador del formato Inbetalningstjänsten."""

    filename_suffix = "_inbetalningstjansten.txt"

    @property
    def name(self) -> str:
        return "INBETALNINGSTJANSTEN"

    def validate_syntax(self, lines: list[str]) -> None:
        validate_line_count(lines, 3)

        opening = lines[0]
        validate_length(opening, LINE_LENGTH, "Opening")
        validate_fields(opening, OPENING_FIELDS, "Opening")

        for line in lines[1:-1]:
            validate_length(line, LINE_LENGTH, "Payment")
            validate_fields(line, PAYMENT_FIELDS, "Payment")

        closing = lines[-1]
        validate_length(closing, LINE_LENGTH, "Closing")
        validate_fields(closing, CLOSING_FIELDS, "Closing")

    def validate_semantics(self, lines: list[str]) -> None:
        closing = lines[-1]
        payments = lines[1:-1]

        declared_count = int(CLOSING_COUNT.extract(closing))
        if declared_count != len(payments):
            raise RecordSemanticError(
                f"Closing post count does not match number of payment lines: "
                f"{declared_count} declared, {len(payments)} found",
                CLOSING_COUNT.start,
            )

        declared_sum = parse_minor_units(CLOSING_SUM.extract(closing))
        actual_sum = sum_amounts(parse_minor_units(AMOUNT.extract(line)) for line in payments)
        if declared_sum != actual_sum:
            raise RecordSemanticError(
                f"Closing post sum does not match payment amounts: "
                f"{declared_sum} declared, {actual_sum} found",
                CLOSING_SUM.start,
            )

    def parse(self, lines: list[str]) -> tuple[InfoLote, list[Pago]]:
        opening = lines[0]
        account_number = f"{CLEARING_NUMBER.extract(opening)} {ACCOUNT_NUMBER.extract(opening)}"
        info = InfoLote(account_number=account_number, payment_date=None, currency=None)
        pagos = [
            Pago(
                amount=parse_minor_units(AMOUNT.extract(line)),
                reference=REFERENCE.extract(line),
            )
            for line in lines[1:-1]
        ]
        return info, pagos
