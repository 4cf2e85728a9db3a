"""
Country and region code to display name mapping.

The table mixes ISO 3166-1 alpha-2 country codes with World Bank aggregate
codes (income groups, regions). Both share a single flat namespace;
AGGREGATE_CODES marks the groupings.
"""

import logging
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

import config

logger = logging.getLogger(__name__)


COUNTRY_NAMES = {
    'BD': 'Bangladesh',
    'BE': 'Belgium',
    'BF': 'Burkina Faso',
    'BG': 'Bulgaria',
    'BA': 'Bosnia and Herzegovina',
    'BB': 'Barbados',
    'BM': 'Bermuda',
    'BN': 'Brunei Darussalam',
    'BO': 'Bolivia',
    'BH': 'Bahrain',
    'BI': 'Burundi',
    'BJ': 'Benin',
    'BT': 'Bhutan',
    'JM': 'Jamaica',
    'BW': 'Botswana',
    'WS': 'Samoa',
    'BR': 'Brazil',
    'BS': 'Bahamas, The',
    'JG': 'Channel Islands',
    'BY': 'Belarus',
    'BZ': 'Belize',
    'RU': 'Russian Federation',
    'RW': 'Rwanda',
    'RS': 'Serbia',
    'TL': 'Timor-Leste',
    'TM': 'Turkmenistan',
    'XT': 'Upper middle income',
    'TJ': 'Tajikistan',
    'RO': 'Romania',
    'GW': 'Guinea-Bissau',
    'GU': 'Guam',
    'GT': 'Guatemala',
    'GR': 'Greece',
    'GQ': 'Equatorial Guinea',
    'JP': 'Japan',
    'GY': 'Guyana',
    'GE': 'Georgia',
    'GD': 'Grenada',
    'GB': 'United Kingdom',
    'GA': 'Gabon',
    'SV': 'El Salvador',
    'GN': 'Guinea',
    'GM': 'Gambia, The',
    'GL': 'Greenland',
    'SA': 'Saudi Arabia',
    'GH': 'Ghana',
    'OM': 'Oman',
    'TN': 'Tunisia',
    'OE': 'OECD members',
    'UY': 'Uruguay',
    'JO': 'Jordan',
    'HR': 'Croatia',
    'HT': 'Haiti',
    'HU': 'Hungary',
    'HK': 'Hong Kong SAR, China',
    'HN': 'Honduras',
    'VE': 'Venezuela, RB',
    'PR': 'Puerto Rico',
    'PS': 'West Bank and Gaza',
    'PW': 'Palau',
    'PT': 'Portugal',
    'PY': 'Paraguay',
    'PA': 'Panama',
    'PF': 'French Polynesia',
    'PG': 'Papua New Guinea',
    'PE': 'Peru',
    'Z4': 'East Asia & Pacific (all income levels)',
    'PK': 'Pakistan',
    'PH': 'Philippines',
    'Z7': 'Europe & Central Asia (all income levels)',
    'ZF': 'Sub-Saharan Africa (developing only)',
    'PL': 'Poland',
    'SN': 'Senegal',
    'ZM': 'Zambia',
    'ZJ': 'Latin America & Caribbean (all income levels)',
    'EE': 'Estonia',
    'EG': 'Egypt, Arab Rep.',
    'ZG': 'Sub-Saharan Africa (all income levels)',
    'ZA': 'South Africa',
    'EC': 'Ecuador',
    'IT': 'Italy',
    'XL': 'Least developed countries: UN classification',
    'VN': 'Vietnam',
    'SB': 'Solomon Islands',
    'EU': 'European Union',
    'ET': 'Ethiopia',
    'SO': 'Somalia',
    'ZW': 'Zimbabwe',
    'ZQ': 'Middle East & North Africa (all income levels)',
    'ES': 'Spain',
    'ER': 'Eritrea',
    'ME': 'Montenegro',
    'MD': 'Moldova',
    'MG': 'Madagascar',
    'MF': 'St. Martin (French part)',
    'MA': 'Morocco',
    'MC': 'Monaco',
    'UZ': 'Uzbekistan',
    'MM': 'Myanmar',
    'ML': 'Mali',
    'MO': 'Macao SAR, China',
    'MN': 'Mongolia',
    'MH': 'Marshall Islands',
    'MK': 'Macedonia, FYR',
    'MU': 'Mauritius',
    'MT': 'Malta',
    'MW': 'Malawi',
    'MV': 'Maldives',
    'MP': 'Northern Mariana Islands',
    'MR': 'Mauritania',
    'IM': 'Isle of Man',
    'UG': 'Uganda',
    'MY': 'Malaysia',
    'MX': 'Mexico',
    'IL': 'Israel',
    'FR': 'France',
    '1W': 'World',
    'S3': 'Caribbean small states',
    'S2': 'Pacific island small states',
    'S1': 'Small states',
    '8S': 'South Asia',
    'XS': 'High income: OECD',
    'S4': 'Other small states',
    '1A': 'Arab World',
    'FI': 'Finland',
    'FJ': 'Fiji',
    'FM': 'Micronesia, Fed. Sts.',
    'FO': 'Faeroe Islands',
    'NI': 'Nicaragua',
    'AZ': 'Azerbaijan',
    'NL': 'Netherlands',
    'NO': 'Norway',
    'NA': 'Namibia',
    'VU': 'Vanuatu',
    'NC': 'New Caledonia',
    'NE': 'Niger',
    'NG': 'Nigeria',
    'NZ': 'New Zealand',
    'NP': 'Nepal',
    'XJ': 'Latin America & Caribbean (developing only)',
    'CI': "Cote d'Ivoire",
    'CH': 'Switzerland',
    'CO': 'Colombia',
    'CN': 'China',
    'CM': 'Cameroon',
    'CL': 'Chile',
    'XC': 'Euro area',
    'CA': 'Canada',
    'CG': 'Congo, Rep.',
    'CF': 'Central African Republic',
    'XD': 'High income',
    'CD': 'Congo, Dem. Rep.',
    'CZ': 'Czech Republic',
    'CY': 'Cyprus',
    'XY': 'Not classified',
    'XR': 'High income: nonOECD',
    'CR': 'Costa Rica',
    'XP': 'Middle income',
    'XQ': 'Middle East & North Africa (developing only)',
    'CW': 'Curacao',
    'CV': 'Cape Verde',
    'CU': 'Cuba',
    'XU': 'North America',
    'SZ': 'Swaziland',
    'SY': 'Syrian Arab Republic',
    'SX': 'Sint Maarten (Dutch part)',
    'KG': 'Kyrgyz Republic',
    'KE': 'Kenya',
    'SS': 'South Sudan',
    'SR': 'Suriname',
    'KI': 'Kiribati',
    'KH': 'Cambodia',
    'KN': 'St. Kitts and Nevis',
    'KM': 'Comoros',
    'ST': 'Sao Tome and Principe',
    'SK': 'Slovak Republic',
    'KR': 'Korea, Rep.',
    'SI': 'Slovenia',
    'KP': 'Korea, Dem. Rep.',
    'KW': 'Kuwait',
    'KV': 'Kosovo',
    'SM': 'San Marino',
    'SL': 'Sierra Leone',
    'SC': 'Seychelles',
    'KZ': 'Kazakhstan',
    'KY': 'Cayman Islands',
    'SG': 'Singapore',
    'SE': 'Sweden',
    'SD': 'Sudan',
    'DO': 'Dominican Republic',
    'DM': 'Dominica',
    'DJ': 'Djibouti',
    'DK': 'Denmark',
    'DE': 'Germany',
    'YE': 'Yemen, Rep.',
    'DZ': 'Algeria',
    'US': 'United States',
    'XN': 'Lower middle income',
    'XO': 'Low & middle income',
    '7E': 'Europe & Central Asia (developing only)',
    'LB': 'Lebanon',
    'LC': 'St. Lucia',
    'LA': 'Lao PDR',
    'TV': 'Tuvalu',
    'TT': 'Trinidad and Tobago',
    'XM': 'Low income',
    'TR': 'Turkey',
    'LK': 'Sri Lanka',
    'LI': 'Liechtenstein',
    'LV': 'Latvia',
    'TO': 'Tonga',
    'LT': 'Lithuania',
    'LU': 'Luxembourg',
    'LR': 'Liberia',
    'LS': 'Lesotho',
    'TH': 'Thailand',
    'TG': 'Togo',
    'TD': 'Chad',
    'TC': 'Turks and Caicos Islands',
    'LY': 'Libya',
    'VC': 'St. Vincent and the Grenadines',
    'AE': 'United Arab Emirates',
    'AD': 'Andorra',
    'AG': 'Antigua and Barbuda',
    'AF': 'Afghanistan',
    'IQ': 'Iraq',
    'VI': 'Virgin Islands (U.S.)',
    'IS': 'Iceland',
    'IR': 'Iran, Islamic Rep.',
    'AM': 'Armenia',
    'AL': 'Albania',
    'AO': 'Angola',
    'AS': 'American Samoa',
    'AR': 'Argentina',
    'AU': 'Australia',
    'AT': 'Austria',
    'AW': 'Aruba',
    'IN': 'India',
    'TZ': 'Tanzania',
    '4E': 'East Asia & Pacific (developing only)',
    'IE': 'Ireland',
    'ID': 'Indonesia',
    'XE': 'Heavily indebted poor countries (HIPC)',
    'UA': 'Ukraine',
    'QA': 'Qatar',
    'MZ': 'Mozambique',
}

# Codes that denote a grouping rather than a single country
AGGREGATE_CODES = frozenset({
    '1A', '1W', '4E', '7E', '8S', 'EU', 'OE',
    'S1', 'S2', 'S3', 'S4',
    'XC', 'XD', 'XE', 'XJ', 'XL', 'XM', 'XN', 'XO', 'XP', 'XQ', 'XR', 'XS', 'XT', 'XU', 'XY',
    'Z4', 'Z7', 'ZF', 'ZG', 'ZJ', 'ZQ',
})


class UnknownCode(KeyError):
    """Raised when a code is not present in the table."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return f"Unknown country code: {self.code!r}"


class Entry(NamedTuple):
    code: str
    name: str


class CodeResolver:
    """Read-only lookup from country/region code to display name"""

    def __init__(
        self,
        names: Mapping[str, str],
        aggregate_codes=frozenset(),
        normalize_case: Optional[bool] = None
    ):
        """
        Build the resolver from a code -> name mapping.

        Args:
            names: Mapping of code to display name. Copied, so later changes
                to the source mapping are not seen.
            aggregate_codes: Codes in `names` that denote groupings
            normalize_case: Strip and upper-case codes before lookup.
                Defaults to config.NORMALIZE_CODE_CASE.

        Raises:
            ValueError: If a name is empty or an aggregate code is not in the table
        """
        empty = [code for code, name in names.items() if not name]
        if empty:
            raise ValueError(f"Empty display name for codes: {', '.join(empty)}")

        missing = sorted(set(aggregate_codes) - set(names))
        if missing:
            raise ValueError(f"Aggregate codes not in table: {', '.join(missing)}")

        self._names = MappingProxyType(dict(names))
        self._aggregate_codes = frozenset(aggregate_codes)
        self.normalize_case = config.NORMALIZE_CODE_CASE if normalize_case is None else normalize_case

        logger.info(
            f"Loaded {len(self._names)} country names "
            f"({len(self._aggregate_codes)} aggregate codes)"
        )

    def _key(self, code) -> Optional[str]:
        if not isinstance(code, str):
            return None
        if self.normalize_case:
            return code.strip().upper()
        return code

    def resolve(self, code: str) -> str:
        """
        Get the display name for a code.

        Args:
            code: Country or aggregate code (e.g., 'US', 'XD')

        Returns:
            Display name, e.g. 'United States'

        Raises:
            UnknownCode: If the code is not in the table
        """
        key = self._key(code)
        if key is None or key not in self._names:
            raise UnknownCode(code)
        return self._names[key]

    def has(self, code: str) -> bool:
        """Check whether a code is known, without raising"""
        key = self._key(code)
        return key is not None and key in self._names

    def is_aggregate(self, code: str) -> bool:
        """Check whether a code denotes a grouping (income level, region, ...)"""
        key = self._key(code)
        return key is not None and key in self._aggregate_codes

    def entries(self) -> Tuple[Entry, ...]:
        """All (code, name) pairs in table order"""
        return tuple(Entry(code, name) for code, name in self._names.items())

    def countries(self) -> Tuple[Entry, ...]:
        return tuple(entry for entry in self.entries() if entry.code not in self._aggregate_codes)

    def aggregates(self) -> Tuple[Entry, ...]:
        return tuple(entry for entry in self.entries() if entry.code in self._aggregate_codes)

    def __contains__(self, code) -> bool:
        return self.has(code)

    def __iter__(self):
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


# Built once at import, shared by every caller
resolver = CodeResolver(COUNTRY_NAMES, AGGREGATE_CODES)


def get_country_name(country_code: str) -> str:
    """
    Get a display label for a country code.

    Unknown codes are rendered as the raw code so one bad value does not
    break a whole page or sheet.

    Args:
        country_code: Country or aggregate code (e.g., 'US', 'GB')

    Returns:
        Country name, or the code itself if not found
    """
    if not country_code:
        return ''

    try:
        return resolver.resolve(country_code)
    except UnknownCode:
        logger.debug(f"No country name for {country_code!r}, showing raw code")
        return str(country_code)
