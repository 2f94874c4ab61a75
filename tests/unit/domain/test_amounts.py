"""
Tests para src.domain.shared.amounts

Cada caso viene de un formato real:
- "    3000,00"            → Betalningsservice (coma decimal, relleno izquierdo)
- "00000000000000001000"   → Inbetalningstjänsten (öre, ceros a la izquierda)
"""

from decimal import Decimal

import pytest

from src.domain.shared.amounts import (
    format_amount,
    parse_comma_decimal,
    parse_minor_units,
    sum_amounts,
)


class TestParseCommaDecimal:
    def test_con_coma(self):
        assert parse_comma_decimal("    3000,00") == Decimal("3000.00")

    def test_sin_decimales(self):
        assert parse_comma_decimal("42") == Decimal("42")

    def test_ceros_a_la_izquierda(self):
        assert parse_comma_decimal("0000000010,00") == Decimal("10.00")

    def test_conserva_la_escala(self):
        assert str(parse_comma_decimal("1,50")) == "1.50"

    def test_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            parse_comma_decimal("    ")

    def test_texto_invalido_lanza_error(self):
        with pytest.raises(ValueError, match="No se pudo convertir"):
            parse_comma_decimal("ABC")


class TestParseMinorUnits:
    def test_divide_entre_cien(self):
        assert parse_minor_units("00000000000000001000") == Decimal("10.00")

    def test_centavos(self):
        assert parse_minor_units("5") == Decimal("0.05")

    def test_cero(self):
        assert parse_minor_units("0000") == Decimal("0")

    def test_exacto_con_veinte_digitos(self):
        assert parse_minor_units("99999999999999999999") == Decimal("999999999999999999.99")

    def test_no_numerico_lanza_error(self):
        with pytest.raises(ValueError):
            parse_minor_units("12A4")


class TestSumAmounts:
    def test_suma_exacta(self):
        """0.1 + 0.2 debe ser exactamente 0.3 (con float no lo es)."""
        assert sum_amounts([Decimal("0.1"), Decimal("0.2")]) == Decimal("0.3")

    def test_lista_vacia(self):
        assert sum_amounts([]) == Decimal("0")

    def test_acepta_generador(self):
        assert sum_amounts(Decimal(n) for n in ("1", "2", "3")) == Decimal("6")

    def test_no_redondea_montos_grandes(self):
        montos = [Decimal("999999999999999999.99")] * 1000
        assert sum_amounts(montos) == Decimal("999999999999999999990.00")

    def test_igualdad_independiente_de_la_escala(self):
        assert sum_amounts([Decimal("10.00"), Decimal("20.00")]) == Decimal("30")


class TestFormatAmount:
    def test_separador_de_miles(self):
        assert format_amount(Decimal("1234567.8")) == "1,234,567.80"

    def test_cero(self):
        assert format_amount(Decimal("0")) == "0.00"
