"""
Cloud Function entry points for country name lookup.
"""

import logging
import json
from typing import Dict, Any

import country_names
import config

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

LIST_TYPES = ('all', 'country', 'aggregate')


def _response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'body': json.dumps(payload)
    }


def _query_param(request, name: str) -> str:
    args = getattr(request, 'args', None) or {}
    value = args.get(name)
    return value.strip() if isinstance(value, str) else ''


def country_name_handler(request):
    """
    Resolve a single code: GET /country-name?code=XX

    Args:
        request: Flask request object (for HTTP triggers)

    Returns:
        Response dictionary
    """
    try:
        code = _query_param(request, 'code')
        if not code:
            return _response(400, {'error': "Missing 'code' query parameter"})

        resolver = country_names.resolver
        try:
            name = resolver.resolve(code)
        except country_names.UnknownCode:
            logger.warning(f"Lookup for unknown country code {code!r}")
            return _response(404, {'error': 'Unknown country code', 'code': code})

        return _response(200, {
            'code': code.upper() if resolver.normalize_case else code,
            'name': name,
            'aggregate': resolver.is_aggregate(code)
        })

    except Exception as e:
        logger.error(f"Error in country name lookup: {e}", exc_info=True)
        return _response(500, {
            'error': str(e),
            'message': 'Country name lookup failed'
        })


def country_list_handler(request):
    """
    List table entries for selection lists: GET /country-names?type=country

    `type` is one of 'all' (default), 'country' or 'aggregate'.

    Args:
        request: Flask request object (for HTTP triggers)

    Returns:
        Response dictionary
    """
    try:
        list_type = (_query_param(request, 'type') or 'all').lower()
        if list_type not in LIST_TYPES:
            return _response(400, {
                'error': f"Invalid 'type' {list_type!r}, expected one of: {', '.join(LIST_TYPES)}"
            })

        resolver = country_names.resolver
        if list_type == 'country':
            entries = resolver.countries()
        elif list_type == 'aggregate':
            entries = resolver.aggregates()
        else:
            entries = resolver.entries()

        logger.info(f"Listing {len(entries)} entries (type={list_type})")

        return _response(200, {
            'count': len(entries),
            'entries': [{'code': entry.code, 'name': entry.name} for entry in entries]
        })

    except Exception as e:
        logger.error(f"Error listing country names: {e}", exc_info=True)
        return _response(500, {
            'error': str(e),
            'message': 'Country name listing failed'
        })


# For Cloud Functions HTTP trigger
def main(request):
    """Main entry point for Cloud Function"""
    return country_name_handler(request)


# For local testing
if __name__ == '__main__':
    class MockRequest:
        args = {'code': 'GB'}

    result = country_name_handler(MockRequest())
    print(json.dumps(result, indent=2))
