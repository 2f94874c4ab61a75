"""
Punto de entrada CLI: payment-parser.

Uso:
    # Procesar un solo archivo e imprimir los pagos
    payment-parser /ruta/Exempelfil_betalningsservice.txt

    # Procesar todos los .txt de una carpeta y exportar a Excel
    payment-parser /ruta/carpeta --excel -o /ruta/salida

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (ConsoleLogger, receptores, ExcelWriter).
- Las inyecta en el MultiTypePaymentFileProcessor.
- Ejecuta el procesamiento.

No contiene lógica de negocio — solo "fontanería" (wiring).
"""

import argparse
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.receivers.console_receiver import ConsolePaymentReceiver
from src.adapters.output.receivers.memory_receiver import MemoryPaymentReceiver
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import PaymentParserError
from src.domain.models.lote_pagos import LotePagos
from src.domain.ports.payment_file_processor import PaymentFileProcessor
from src.domain.ports.payment_receiver import PaymentReceiver
from src.domain.ports.process_logger import ProcessLogger
from src.infrastructure.registry import create_default_processor, create_default_registry


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI.

    Returns:
        0 si todos los archivos recibidos se procesaron sin errores,
        1 si alguno falló o si no se procesó ningún archivo.
    """
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        return 1

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()
    processor = create_default_processor(logger=logger)

    archivos = _collect_files(input_path)

    print("=" * 60)
    print("PAYMENT FILE PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Archivos: {len(archivos)}")
    print(f"  Formatos disponibles: {', '.join(create_default_registry().available_formats)}")
    print()

    lotes = _process_files(archivos, processor, logger, usar_memoria=args.excel)

    if args.excel and lotes:
        output_dir = Path(args.output_dir) if args.output_dir else _default_output_dir(input_path)
        _export_excel(lotes, output_dir, logger)

    # --- Resumen final ---
    logger.print_summary()

    summary = logger.get_summary()
    if summary["archivos_con_error"] or not summary["archivos_procesados"]:
        return 1
    return 0


def _collect_files(input_path: Path) -> list[Path]:
    """Un archivo suelto, o todos los .txt de un directorio (recursivo, ordenados)."""
    if input_path.is_dir():
        return sorted(p for p in input_path.glob("**/*.txt") if p.is_file())
    return [input_path]


def _default_output_dir(input_path: Path) -> Path:
    return input_path if input_path.is_dir() else input_path.parent


def _process_files(
    archivos: list[Path],
    processor: PaymentFileProcessor,
    logger: ProcessLogger,
    usar_memoria: bool,
) -> list[LotePagos]:
    """Procesa cada archivo; un archivo inválido no detiene a los demás.

    Returns:
        Lotes completos, en el orden de los archivos.
    """
    lotes: list[LotePagos] = []

    for archivo in archivos:
        # Receptor nuevo por archivo: un archivo que falla no deja eventos.
        memoria = MemoryPaymentReceiver()
        memoria.set_source(archivo.name)
        receiver = memoria if usar_memoria else _TeeReceiver(memoria, ConsolePaymentReceiver())

        try:
            handled = processor.process_file(archivo, receiver)
        except (PaymentParserError, OSError) as e:
            logger.log_error(archivo, e)
            continue

        if not handled:
            continue

        for lote in memoria.lotes:
            logger.log_bundle_complete(archivo, lote.info.account_number, lote.num_pagos, lote.total)
            lotes.append(lote)

    return lotes


def _export_excel(lotes: list[LotePagos], output_dir: Path, logger: ProcessLogger) -> None:
    writer = ExcelWriter()
    output_dir.mkdir(parents=True, exist_ok=True)

    for lote in lotes:
        nombre_base = Path(lote.archivo_origen).stem
        try:
            ruta = writer.write_single(lote, output_dir / f"pagos_{nombre_base}.xlsx")
        except PaymentParserError as e:
            logger.log_error(Path(lote.archivo_origen), e)
            continue
        print(f"\n📁 Excel generado: {ruta}")

    if len(lotes) > 1:
        consolidado = output_dir / "consolidado.xlsx"
        try:
            writer.write_consolidated(lotes, consolidado)
        except PaymentParserError as e:
            logger.log_error(consolidado, e)
            return
        print(f"\n📁 Consolidado generado: {consolidado}")


class _TeeReceiver(PaymentReceiver):
    """Imprime los eventos y además los acumula para la bitácora."""

    def __init__(self, memoria: MemoryPaymentReceiver, consola: ConsolePaymentReceiver) -> None:
        self._memoria = memoria
        self._consola = consola

    def start_payment_bundle(
        self,
        account_number: str,
        payment_date: date | None,
        currency: str | None,
    ) -> None:
        self._consola.start_payment_bundle(account_number, payment_date, currency)
        self._memoria.start_payment_bundle(account_number, payment_date, currency)

    def payment(self, amount: Decimal, reference: str) -> None:
        self._consola.payment(amount, reference)
        self._memoria.payment(amount, reference)

    def end_payment_bundle(self) -> None:
        self._consola.end_payment_bundle()
        self._memoria.end_payment_bundle()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Validador y parser de archivos de pagos de ancho fijo "
        "(Betalningsservice, Inbetalningstjänsten)",
        epilog="Ejemplo: payment-parser /ruta/archivos --excel -o /ruta/salida",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un archivo de pagos o a un directorio con archivos .txt",
    )

    parser.add_argument(
        "--excel",
        action="store_true",
        help="Exportar los lotes a Excel en lugar de imprimir los pagos.",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio de entrada.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
