#!/usr/bin/env python3
"""
Inventory Management Console

Interactive text menu over the catalog:
- Product entry loop (Electronics or Food)
- Display, sell, discount, restock, save and view the saved snapshot
- Re-prompts on malformed input; end of input exits cleanly

Usage:
    python inventory_cli.py
    python inventory_cli.py --snapshot-path inventory.txt --log-path transaction_log.txt
    python inventory_cli.py --env-file .env --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO, TypeVar

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import TypeAdapter, ValidationError

from repositories.storage import load_storage_settings
from scripts.input_models import (
    NON_NEGATIVE_AMOUNT,
    NON_NEGATIVE_INT,
    POSITIVE_INT,
    PRODUCT_NAME,
    PRODUCT_TYPE,
    YES_NO,
    ProductEntry,
)
from services.catalog_service import Catalog

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MENU = """
=== Menu ===
1. Display Inventory
2. Sell Product
3. Apply Discount
4. Restock Low Inventory
5. Save Inventory to File
6. View Saved Snapshot
7. Exit"""

EXIT_OPTION = 7


class InventoryConsole:
    """Drives a Catalog from a text input stream."""

    def __init__(self, catalog: Catalog, stdin: TextIO, stdout: TextIO) -> None:
        self.catalog = catalog
        self.stdin = stdin
        self.stdout = stdout

    def _write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.strip()

    def _ask(self, prompt: str, adapter: TypeAdapter[T]) -> T:
        while True:
            raw = self._read(prompt)
            try:
                return adapter.validate_python(raw)
            except ValidationError:
                self._write("Invalid input. Please try again.")

    def _ask_yes_no(self, prompt: str) -> bool:
        while True:
            raw = self._read(prompt).lower()
            try:
                return YES_NO.validate_python(raw) == "yes"
            except ValidationError:
                self._write("Please enter 'yes' or 'no'.")

    def enter_products(self) -> None:
        while self._ask_yes_no("\nAdd a new product? (yes/no): "):
            name = self._ask("Enter product name: ", PRODUCT_NAME)
            price = self._ask("Enter product price: $", NON_NEGATIVE_AMOUNT)
            stock = self._ask("Enter stock quantity: ", NON_NEGATIVE_INT)

            raw_type = self._read("Enter product type (Electronics or Food): ").lower()
            try:
                product_type = PRODUCT_TYPE.validate_python(raw_type)
            except ValidationError:
                self._write("Invalid product type. Skipping...")
                continue

            if product_type == "electronics":
                entry = ProductEntry(
                    name=name,
                    price=price,
                    stock_quantity=stock,
                    product_type=product_type,
                    warranty_months=self._ask("Enter warranty period (months): ", NON_NEGATIVE_INT),
                )
            else:
                entry = ProductEntry(
                    name=name,
                    price=price,
                    stock_quantity=stock,
                    product_type=product_type,
                    expiration_date=self._read("Enter expiration date (YYYY-MM-DD): "),
                )

            result = self.catalog.add_product(entry.to_product())
            if not result:
                self._write(result.message)

    def display_inventory(self) -> None:
        listing = self.catalog.list_all()
        if len(listing) == 0:
            self._write("Inventory is empty.")
            return
        for description in listing:
            self._write(description)

    def sell_product(self) -> None:
        self._write("\n=== Inventory ===")
        self.display_inventory()
        name = self._read("Enter product name to sell: ")
        quantity = self._ask("Enter quantity to sell: ", POSITIVE_INT)
        if self.catalog.sell(name, quantity):
            self._write("Sale successful!")
        else:
            self._write("Sale failed. Product not found or insufficient stock.")

    def apply_discount(self) -> None:
        name = self._read("Enter product name for discount: ")
        percentage = self._ask("Enter discount percentage: ", NON_NEGATIVE_AMOUNT)
        if self.catalog.discount(name, percentage):
            self._write("Discount applied.")
        else:
            self._write("Product not found.")

    def restock(self) -> None:
        threshold = self._ask("Enter stock threshold for restocking: ", NON_NEGATIVE_INT)
        restocked = self.catalog.check_and_restock(threshold)
        if not restocked:
            self._write("No products below threshold.")
        for name in restocked:
            self._write(f"Restocked {name} by {self.catalog.restock_amount} units.")

    def save_inventory(self) -> None:
        self.catalog.export_snapshot()
        self._write("Inventory saved.")

    def view_snapshot(self) -> None:
        try:
            entries = self.catalog.read_snapshot()
        except ValueError as e:
            self._write(f"Saved snapshot is unreadable: {e}")
            return
        except OSError as e:
            logger.warning("Failed to read inventory snapshot", exc_info=True)
            self._write(f"Could not read saved snapshot: {e}")
            return
        if not entries:
            self._write("No saved snapshot.")
            return
        for entry in entries:
            self._write(f"{entry.name} | {entry.kind.value} | {entry.stock_quantity}")

    def run_menu(self) -> None:
        actions = {
            1: self.display_inventory,
            2: self.sell_product,
            3: self.apply_discount,
            4: self.restock,
            5: self.save_inventory,
            6: self.view_snapshot,
        }
        while True:
            self._write(MENU)
            option = self._ask("Choose an option: ", POSITIVE_INT)
            if option == EXIT_OPTION:
                self._write("Exiting program. Goodbye!")
                return
            action = actions.get(option)
            if action is None:
                self._write("Invalid option. Please try again.")
                continue
            action()

    def run(self) -> int:
        self._write("=== Inventory Management System ===")
        try:
            self.enter_products()
            self.run_menu()
        except EOFError:
            self._write("\nEnd of input. Goodbye!")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive inventory manager for Electronics and Food products",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use paths from the environment / .env (defaults: inventory.txt, transaction_log.txt)
  python inventory_cli.py

  # Explicit paths
  python inventory_cli.py --snapshot-path data/inventory.txt --log-path data/log.txt
        """
    )

    parser.add_argument(
        "--snapshot-path",
        help="Snapshot file (default: $INVENTORY_SNAPSHOT_PATH or inventory.txt)"
    )

    parser.add_argument(
        "--log-path",
        help="Audit log file (default: $INVENTORY_LOG_PATH or transaction_log.txt)"
    )

    parser.add_argument(
        "--env-file",
        help="Path to a .env file with storage settings"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log catalog notices at DEBUG level to stderr"
    )

    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        settings = load_storage_settings(args.env_file)
    except RuntimeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.snapshot_path:
        settings = replace(settings, snapshot_path=Path(args.snapshot_path))
    if args.log_path:
        settings = replace(settings, audit_log_path=Path(args.log_path))

    catalog = Catalog(
        audit_sink=settings.audit_log(),
        snapshot_sink=settings.snapshot_store(),
    )
    console = InventoryConsole(
        catalog,
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
    )

    try:
        return console.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
