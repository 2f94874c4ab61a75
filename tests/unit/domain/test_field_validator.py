"""
Tests para src.domain.shared.field_validator

Los patrones deben comportarse igual que en los layouts reales de los
bancos: coincidencia completa del campo, \\d y \\s solo ASCII, y letras
suecas (Å, Ä, Ö) aceptadas en los campos de texto.
"""

import pytest

from src.domain.exceptions import RecordSyntaxError
from src.domain.models.field_spec import FieldSpec
from src.domain.shared.field_validator import (
    ACCOUNT_NUMBER_PATTERN,
    DATE_PATTERN,
    DECIMAL_PATTERN,
    INTEGER_PATTERN,
    NUMBER_PATTERN,
    STRING_PATTERN,
    literal,
    validate_field,
    validate_fields,
    validate_length,
    validate_line_count,
)


def _matches(pattern: str, text: str) -> bool:
    return FieldSpec(0, max(len(text), 1), pattern, "campo").matches(text)


class TestPatrones:
    """Qué acepta y qué rechaza cada patrón compartido."""

    @pytest.mark.parametrize("texto", ["ABC123", "ÅÄÖ", "REF1      ", "     ", "SEK"])
    def test_string_valido(self, texto):
        assert _matches(STRING_PATTERN, texto)

    @pytest.mark.parametrize("texto", ["abc", "REF 1", " REF", "A-1", "åäö"])
    def test_string_invalido(self, texto):
        assert not _matches(STRING_PATTERN, texto)

    @pytest.mark.parametrize("texto", ["0000000002", "         2"])
    def test_integer_valido(self, texto):
        assert _matches(INTEGER_PATTERN, texto)

    @pytest.mark.parametrize("texto", ["2         ", "   -2", "          ", "1,5"])
    def test_integer_invalido(self, texto):
        assert not _matches(INTEGER_PATTERN, texto)

    @pytest.mark.parametrize("texto", ["    3000,00", "0000000030,00", "42", " 1,5"])
    def test_decimal_valido(self, texto):
        assert _matches(DECIMAL_PATTERN, texto)

    @pytest.mark.parametrize("texto", ["30.00", "30,", ",50", "30,00 ", "1,2,3"])
    def test_decimal_invalido(self, texto):
        assert not _matches(DECIMAL_PATTERN, texto)

    def test_date_solo_ocho_digitos(self):
        assert _matches(DATE_PATTERN, "20240115")
        assert not _matches(DATE_PATTERN, "2024011 ")
        assert not _matches(DATE_PATTERN, "2024-1-1")

    @pytest.mark.parametrize("texto", ["1234567 89     ", "5555 5555555555", "1\t2"])
    def test_account_number_valido(self, texto):
        assert _matches(ACCOUNT_NUMBER_PATTERN, texto)

    @pytest.mark.parametrize("texto", ["123456789      ", " 1234567 89    ", "1234567  89    "])
    def test_account_number_invalido(self, texto):
        assert not _matches(ACCOUNT_NUMBER_PATTERN, texto)

    def test_number_sin_espacios(self):
        assert _matches(NUMBER_PATTERN, "0000567890")
        assert not _matches(NUMBER_PATTERN, " 000567890")

    def test_digitos_no_ascii_rechazados(self):
        """'٣' (dígito arábigo) no es \\d en los layouts bancarios."""
        assert not _matches(NUMBER_PATTERN, "12٣4")

    def test_nbsp_no_es_espacio(self):
        """0xA0 en ISO-8859-1 es NBSP; no debe aceptarse como separador."""
        assert not _matches(ACCOUNT_NUMBER_PATTERN, "1234567\xa089")

    def test_literal_escapa_el_texto(self):
        assert _matches(literal("00"), "00")
        assert not _matches(literal("0."), "0X")


class TestValidateField:
    """Pruebas para validate_field (offset y texto del error)."""

    def test_campo_valido_no_lanza(self):
        validate_field("B0042", FieldSpec(1, 5, NUMBER_PATTERN, "amount"), "Payment")

    def test_error_reporta_offset_y_texto(self):
        campo = FieldSpec(1, 5, NUMBER_PATTERN, "amount")

        with pytest.raises(RecordSyntaxError) as exc_info:
            validate_field("B00X2", campo, "Payment")

        error = exc_info.value
        assert error.offset == 1
        assert error.record_type == "Payment"
        assert error.texto == "00X2"
        assert "Payment post has invalid amount syntax" in str(error)

    def test_linea_corta_reporta_inicio_del_campo(self):
        with pytest.raises(RecordSyntaxError) as exc_info:
            validate_field("B00", FieldSpec(1, 5, NUMBER_PATTERN, "amount"), "Payment")
        assert exc_info.value.offset == 1

    def test_validate_fields_se_detiene_en_el_primero(self):
        campos = [
            FieldSpec(0, 1, literal("B"), "type"),
            FieldSpec(1, 3, NUMBER_PATTERN, "amount"),
            FieldSpec(3, 5, NUMBER_PATTERN, "count"),
        ]
        with pytest.raises(RecordSyntaxError) as exc_info:
            validate_fields("BXXYY", campos, "Payment")
        assert exc_info.value.offset == 1


class TestValidateLength:
    def test_longitud_exacta(self):
        validate_length("X" * 80, 80, "Opening")

    @pytest.mark.parametrize("largo", [0, 79, 81])
    def test_longitud_incorrecta(self, largo):
        with pytest.raises(RecordSyntaxError, match="invalid length") as exc_info:
            validate_length("X" * largo, 80, "Opening")
        assert exc_info.value.offset == 0
        assert exc_info.value.record_type == "Opening"


class TestValidateLineCount:
    def test_suficientes_lineas(self):
        validate_line_count(["a", "b"], 2)

    def test_faltan_lineas(self):
        with pytest.raises(RecordSyntaxError, match="at least 3 lines") as exc_info:
            validate_line_count(["a", "b"], 3)
        assert exc_info.value.offset == 0
