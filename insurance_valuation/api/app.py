"""HTTP boundary for the valuation engine."""

from http import HTTPStatus
import logging
from typing import Any

from flask import Blueprint
from flask import Flask
from flask import jsonify
from flask import request
from werkzeug.exceptions import HTTPException

from insurance_valuation.domain.errors import ValidationError
from insurance_valuation.run import run_valuation

logger = logging.getLogger(__name__)

SERVICE_INFO = {
    'name': 'Insurance Policy Valuation API',
    'version': '0.1.0',
    'description': 'Secondary-market valuation of transferable insurance '
                   'policies',
    'features': [
        'Time premium from remaining contract years',
        'Psychological value from relieved premium burden',
        'Market value from interest and inflation protection',
        'Insurer fulfillment adjustment',
        'Transaction and liquidity value',
        'Optimistic / realistic / conservative scenarios',
    ],
    'usage': {
        'method': 'POST',
        'endpoint': '/api/valuation',
        'required': [
            'company',
            'productName',
            'contractPeriod',
            'annualPayment',
            'surrenderValue',
        ],
        'query': {
            'insurerReliability': 'true to fill a missing fulfillmentRate '
                                  'from the insurer table',
        },
    },
}

api_bp = Blueprint('api', __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
  """Convert validation errors into JSON responses."""
  return jsonify({
      'success': False,
      'error': str(exc),
      'missing': exc.missing,
      'invalid': exc.invalid,
  }), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
  """Hide internal failures behind a generic 500."""
  if isinstance(exc, HTTPException):
    return exc
  logger.exception('Valuation request failed')
  return jsonify({
      'success': False,
      'error': 'Internal valuation error',
  }), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.get('/ping')
def ping() -> Any:
  """Health-check endpoint."""
  return jsonify({'message': 'pong'})


@api_bp.get('/valuation')
def valuation_info() -> Any:
  """Describe the valuation service."""
  return jsonify(SERVICE_INFO)


@api_bp.post('/valuation')
def valuation() -> Any:
  """Value one policy from a JSON object body."""
  payload = request.get_json(silent=True)
  if not isinstance(payload, dict):
    return jsonify({
        'success': False,
        'error': 'Request body must be a JSON object',
    }), HTTPStatus.BAD_REQUEST

  insurer_reliability = (request.args.get('insurerReliability', '').lower()
                         == 'true')
  report = run_valuation(payload, insurer_reliability=insurer_reliability)
  return jsonify(report)


def create_app() -> Flask:
  """Build the Flask app instance."""
  app = Flask(__name__)
  app.register_blueprint(api_bp, url_prefix='/api')
  return app
