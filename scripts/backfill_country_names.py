#!/usr/bin/env python3
"""
Script to backfill the country name column of a sheet from its country code column
"""

import argparse
import logging
import os
import sys
from typing import List, Tuple

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

# Add parent directory to path to import country_names
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'cloud-function'))
import config  # noqa: E402
import country_names  # noqa: E402

logger = logging.getLogger(__name__)

HEADER = ['Country', 'Country_Name']
KEY_FILE = "service-account-key.json"


def fill_country_names(rows: List[List[str]]) -> Tuple[List[List[str]], int]:
    """
    Fill empty name cells from the code in the same row.

    The sheet's own header and every existing cell are written back as read;
    only empty name cells change.

    Args:
        rows: Sheet values, header first. Rows may be ragged.

    Returns:
        Tuple of (updated rows, number of rows filled)
    """
    header = list(rows[0]) if rows and rows[0] else list(HEADER)
    updated_rows = [header]
    updated_count = 0

    for row in rows[1:]:
        raw_code = row[0] if len(row) > 0 else ''
        raw_name = row[1] if len(row) > 1 else ''
        code = raw_code.strip()

        if code and not raw_name.strip():
            raw_name = country_names.get_country_name(code)
            updated_count += 1

        updated_rows.append([raw_code, raw_name])

    return updated_rows, updated_count


def build_sheets_service(key_file: str):
    if not os.path.exists(key_file):
        raise ValueError(f"{key_file} not found")

    creds = service_account.Credentials.from_service_account_file(
        key_file,
        scopes=config.GOOGLE_SHEETS_SCOPES
    )
    return build('sheets', 'v4', credentials=creds).spreadsheets()


def backfill(sheets, sheet_id: str, sheet_name: str, dry_run: bool = False) -> int:
    """
    Read the code/name columns, fill missing names and write them back.

    Returns:
        Number of rows filled
    """
    read_range = f"{sheet_name}!{config.COUNTRY_CODE_COLUMN}:{config.COUNTRY_NAME_COLUMN}"
    logger.info(f"Reading data from '{read_range}'")

    result = sheets.values().get(
        spreadsheetId=sheet_id,
        range=read_range
    ).execute()

    values = result.get('values', [])
    if len(values) < 2:
        logger.info("No data rows found")
        return 0

    logger.info(f"Found {len(values) - 1} data rows (excluding header)")

    updated_rows, updated_count = fill_country_names(values)
    if updated_count == 0:
        logger.info("All rows already have a country name")
        return 0

    if dry_run:
        logger.info(f"Dry run: would update {updated_count} rows")
        return updated_count

    write_range = (
        f"{sheet_name}!{config.COUNTRY_CODE_COLUMN}1:"
        f"{config.COUNTRY_NAME_COLUMN}{len(updated_rows)}"
    )
    sheets.values().update(
        spreadsheetId=sheet_id,
        range=write_range,
        valueInputOption='USER_ENTERED',
        body={'values': updated_rows}
    ).execute()

    logger.info(f"Updated {updated_count} rows with country names")
    return updated_count


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip())
    parser.add_argument('--sheet-id', default=config.GOOGLE_SHEETS_ID)
    parser.add_argument('--key-file', default=KEY_FILE)
    parser.add_argument('--sheet-name', default=config.GOOGLE_SHEETS_COUNTRY_SHEET)
    parser.add_argument('--dry-run', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.sheet_id:
        logger.error("GOOGLE_SHEETS_ID must be set in environment or passed with --sheet-id")
        return 1

    try:
        sheets = build_sheets_service(args.key_file)
        backfill(sheets, args.sheet_id, args.sheet_name, dry_run=args.dry_run)
    except (ValueError, HttpError) as e:
        logger.error(f"Backfill failed: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
