"""
Tests para src.domain.shared.file_reader

Los archivos se leen en ISO-8859-1: cada byte es un carácter, así que las
columnas de los layouts coinciden con los offsets en bytes.
"""

import pytest

from src.domain.shared.file_reader import read_lines


class TestReadLines:
    def test_separa_lineas_sin_terminadores(self, tmp_path):
        archivo = tmp_path / "a.txt"
        archivo.write_bytes(b"uno\ndos\n")
        assert read_lines(archivo) == ["uno", "dos"]

    def test_crlf_y_cr(self, tmp_path):
        archivo = tmp_path / "a.txt"
        archivo.write_bytes(b"uno\r\ndos\rtres")
        assert read_lines(archivo) == ["uno", "dos", "tres"]

    def test_lineas_vacias_intermedias_se_conservan(self, tmp_path):
        archivo = tmp_path / "a.txt"
        archivo.write_bytes(b"uno\n\ndos\n")
        assert read_lines(archivo) == ["uno", "", "dos"]

    def test_archivo_vacio(self, tmp_path):
        archivo = tmp_path / "a.txt"
        archivo.write_bytes(b"")
        assert read_lines(archivo) == []

    def test_latin1_un_caracter_por_byte(self, tmp_path):
        archivo = tmp_path / "a.txt"
        archivo.write_bytes("ÅÄÖ".encode("latin-1") + b"\n")
        lineas = read_lines(archivo)
        assert lineas == ["ÅÄÖ"]
        assert len(lineas[0]) == 3

    def test_byte_0x85_no_parte_la_linea(self, tmp_path):
        """0x85 es NEL en latin-1; no es un fin de línea del archivo."""
        archivo = tmp_path / "a.txt"
        archivo.write_bytes(b"ab\x85cd\n")
        assert read_lines(archivo) == ["ab\x85cd"]

    def test_archivo_inexistente_propaga_oserror(self, tmp_path):
        with pytest.raises(OSError):
            read_lines(tmp_path / "no_existe.txt")
