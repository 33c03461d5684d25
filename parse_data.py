# parse_data.py
"""
Parse a ledger-book CSV and print basic stats without touching the database.

Usage:
    python parse_data.py [CSV_PATH]
"""

import sys

from scripts.ingest import parse_ledger_csv, FILE_PATH


def main(file_path: str = FILE_PATH):
    customers_by_key, transactions_list, stats = parse_ledger_csv(file_path)

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Unique customers:      {stats['n_customers']}")
    print(f"Transactions parsed:   {stats['n_transactions']}")
    print(f"Rows with errors:      {stats['n_errors']}")

    if stats["error_examples"]:
        print("\nExample errors:")
        for ex in stats["error_examples"]:
            print(f"- Row {ex['row_number']}: {ex['error']}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
