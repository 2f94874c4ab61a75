"""
Procesador de archivos Betalningsservice.

ESTRUCTURA DEL ARCHIVO (*_betalningsservice.txt):
- Línea 0: registro de apertura, 51 columnas.
- Líneas 1..N: registros de pago, 50 columnas.

Apertura:
    0-1    'O'
    1-16   número de cuenta     "1234567 89     "
    16-30  suma declarada       "      30000,00"  (coma decimal)
    30-40  cantidad de pagos    "0000000002"
    40-48  fecha de pago        "20240115"        (AAAAMMDD)
    48-51  moneda               "SEK"

Pago:
    0-1    'B'
    1-15   monto                " 0000000010,00"
    15-50  referencia           35 caracteres, se entrega sin recortar

Validación semántica:
- La cantidad declarada debe ser igual al número de líneas de pago.
- La fecha debe existir en el calendario.
- La suma declarada debe ser EXACTAMENTE la suma de los montos.
- La moneda no puede estar en blanco.
"""

from src.adapters.input.payment_processors.fixed_width_processor import (
    FixedWidthPaymentFileProcessor,
)
from src.domain.exceptions import RecordSemanticError
from src.domain.models.field_spec import FieldSpec
from src.domain.models.info_lote import InfoLote
from src.domain.models.pago import Pago
from src.domain.shared.amounts import parse_comma_decimal, sum_amounts
from src.domain.shared.date_parser import parse_compact_date
from src.domain.shared.field_validator import (
    ACCOUNT_NUMBER_PATTERN,
    DATE_PATTERN,
    DECIMAL_PATTERN,
    INTEGER_PATTERN,
    STRING_PATTERN,
    literal,
    validate_fields,
    validate_length,
    validate_line_count,
)

OPENING_LINE_LENGTH = 51
PAYMENT_LINE_LENGTH = 50

OPENING_TYPE = FieldSpec(0, 1, literal("O"), "type")
ACCOUNT_NUMBER = FieldSpec(1, 16, ACCOUNT_NUMBER_PATTERN, "account number")
OPENING_SUM = FieldSpec(16, 30, DECIMAL_PATTERN, "sum")
OPENING_COUNT = FieldSpec(30, 40, INTEGER_PATTERN, "count")
PAYMENT_DATE = FieldSpec(40, 48, DATE_PATTERN, "date")
CURRENCY = FieldSpec(48, 51, STRING_PATTERN, "currency")

PAYMENT_TYPE = FieldSpec(0, 1, literal("B"), "type")
AMOUNT = FieldSpec(1, 15, DECIMAL_PATTERN, "amount")
REFERENCE = FieldSpec(15, 50, STRING_PATTERN, "reference")

OPENING_FIELDS = [OPENING_TYPE, ACCOUNT_NUMBER, OPENING_SUM, OPENING_COUNT, PAYMENT_DATE, CURRENCY]
PAYMENT_FIELDS = [PAYMENT_TYPE, AMOUNT, REFERENCE]


class BetalningsserviceProcessor(FixedWidthPaymentFileProcessor):
    """Procesador del formato Betalningsservice."""

    filename_suffix = "_betalningsservice.txt"

    @property
    def name(self) -> str:
        return "BETALNINGSSERVICE"

    def validate_syntax(self, lines: list[str]) -> None:
        validate_line_count(lines, 2)

        opening = lines[0]
        validate_length(opening, OPENING_LINE_LENGTH, "Opening")
        validate_fields(opening, OPENING_FIELDS, "Opening")

        for line in lines[1:]:
            validate_length(line, PAYMENT_LINE_LENGTH, "Payment")
            validate_fields(line, PAYMENT_FIELDS, "Payment")

    def validate_semantics(self, lines: list[str]) -> None:
        opening = lines[0]
        payments = lines[1:]

        declared_count = int(OPENING_COUNT.extract(opening).strip())
        if declared_count != len(payments):
            raise RecordSemanticError(
                f"Opening post count does not match number of payment lines: "
                f"{declared_count} declared, {len(payments)} found",
                OPENING_COUNT.start,
            )

        date_text = PAYMENT_DATE.extract(opening)
        try:
            parse_compact_date(date_text)
        except ValueError:
            raise RecordSemanticError(
                f"Opening post date could not be parsed: {date_text}",
                PAYMENT_DATE.start,
            )

        declared_sum = parse_comma_decimal(OPENING_SUM.extract(opening))
        actual_sum = sum_amounts(parse_comma_decimal(AMOUNT.extract(line)) for line in payments)
        if declared_sum != actual_sum:
            raise RecordSemanticError(
                f"Opening post sum does not match payment amounts: "
                f"{declared_sum} declared, {actual_sum} found",
                OPENING_SUM.start,
            )

        if not CURRENCY.extract(opening).strip():
            raise RecordSemanticError("Opening post currency is empty", CURRENCY.start)

    def parse(self, lines: list[str]) -> tuple[InfoLote, list[Pago]]:
        opening = lines[0]
        info = InfoLote(
            account_number=ACCOUNT_NUMBER.extract(opening).strip(),
            payment_date=parse_compact_date(PAYMENT_DATE.extract(opening)),
            currency=CURRENCY.extract(opening).strip(),
        )
        pagos = [
            Pago(
                amount=parse_comma_decimal(AMOUNT.extract(line)),
                reference=REFERENCE.extract(line),
            )
            for line in lines[1:]
        ]
        return info, pagos
