"""
Configuration constants for the country name service.
"""

import os

# Logging configuration
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Code lookup configuration
# When enabled, codes are stripped and upper-cased before lookup ('gb ' -> 'GB')
NORMALIZE_CODE_CASE = os.environ.get('NORMALIZE_CODE_CASE', 'true').lower() in ('true', '1', 'yes')

# Google Sheets configuration (backfill script)
GOOGLE_SHEETS_ID = os.environ.get('GOOGLE_SHEETS_ID')  # Set via environment variable
GOOGLE_SHEETS_COUNTRY_SHEET = "Countries"
GOOGLE_SHEETS_SCOPES = ['https://www.googleapis.com/auth/spreadsheets']

# Column layout of the country sheet: code in A, display name in B
COUNTRY_CODE_COLUMN = "A"
COUNTRY_NAME_COLUMN = "B"
