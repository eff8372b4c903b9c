"""Flask HTTP layer."""

from insurance_valuation.api.app import api_bp
from insurance_valuation.api.app import create_app

__all__ = [
    'api_bp',
    'create_app',
]
