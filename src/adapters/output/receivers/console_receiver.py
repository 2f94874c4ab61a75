"""
Adaptador de salida: Receptor de pagos a consola.

Imprime cada evento del lote tal como llega. Útil para ejecutar el CLI
a mano y revisar el contenido de un archivo sin generar Excel.
"""

from datetime import date
from decimal import Decimal

from src.domain.ports.payment_receiver import PaymentReceiver


class ConsolePaymentReceiver(PaymentReceiver):
    """Receptor que imprime los eventos de pago a consola."""

    def start_payment_bundle(
        self,
        account_number: str,
        payment_date: date | None,
        currency: str | None,
    ) -> None:
        print("  📦 Inicio de lote")
        print(f"      Cuenta:  {account_number}")
        print(f"      Fecha:   {payment_date.isoformat() if payment_date else '-'}")
        print(f"      Moneda:  {currency or '-'}")

    def payment(self, amount: Decimal, reference: str) -> None:
        print(f"    💸 {amount:>15} | '{reference}'")

    def end_payment_bundle(self) -> None:
        print("  📦 Fin de lote")
