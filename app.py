import logging
import math

from flask import Flask, current_app, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import config
from calculations import InterestInput, compute, normalize_frequency, parse_amount
from validation import ValidationPolicy, blocking_fields, validate_required

logger = logging.getLogger(__name__)

SIMPLE_FIELDS = ('principal', 'rate', 'time')
COMPOUND_FIELDS = ('principal', 'rate', 'time', 'frequency')


class InvalidRequest(Exception):
    def __init__(self, message, fields=None):
        super().__init__(message)
        self.message = message
        self.fields = fields


def _as_text(value):
    """JSON numbers are checked the same way as typed text"""
    if value is None:
        return ''
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _json_number(value):
    """NaN and infinities have no JSON form, they are sent as null"""
    return value if math.isfinite(value) else None


def _result_body(result):
    return {key: _json_number(value) for key, value in result.as_dict().items()}


def _read_json_object():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest('Request body must be a JSON object')
    return data


def _read_fields(names):
    """Return the named values as sent, after the blank-field check"""
    data = _read_json_object()
    fields = {name: data.get(name) for name in names}
    blocked = blocking_fields({name: _as_text(value) for name, value in fields.items()}, app_policy())
    if blocked:
        logger.info("Calculation blocked, missing fields: %s", sorted(blocked))
        raise InvalidRequest('Missing required fields', sorted(blocked))
    return fields


def app_policy():
    return current_app.config['VALIDATION_POLICY']


def create_app(policy=None):
    app = Flask(__name__)
    CORS(app)
    app.config['VALIDATION_POLICY'] = ValidationPolicy.from_value(
        policy if policy is not None else config.VALIDATION_POLICY)
    config.configure_logging(app)

    @app.errorhandler(InvalidRequest)
    def handle_bad_request(error):
        body = {'error': error.message}
        if error.fields is not None:
            body['fields'] = error.fields
        return jsonify(body), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({'error': 'Internal server error'}), 500

    @app.route('/')
    def index():
        return jsonify({
            'name': config.APP_NAME,
            'version': config.APP_VERSION,
            'validation_policy': app.config['VALIDATION_POLICY'].value,
        })

    @app.route('/api/health', methods=['GET'])
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/api/validate', methods=['POST'])
    def validate():
        data = _read_json_object()
        fields = data.get('fields')
        if not isinstance(fields, dict):
            raise InvalidRequest("'fields' must be an object of field name to text")
        invalid = validate_required({name: _as_text(value) for name, value in fields.items()})
        return jsonify({'invalid': sorted(invalid)})

    @app.route('/api/simple-interest', methods=['POST'])
    def simple_interest():
        fields = _read_fields(SIMPLE_FIELDS)
        data = InterestInput(
            principal=parse_amount(fields['principal']),
            rate_percent=parse_amount(fields['rate']),
            time_years=parse_amount(fields['time']),
        )
        result = compute(data)
        logger.debug("Simple interest for %s: %s", data, result)
        return jsonify(_result_body(result))

    @app.route('/api/compound-interest', methods=['POST'])
    def compound_interest():
        fields = _read_fields(COMPOUND_FIELDS)
        data = InterestInput(
            principal=parse_amount(fields['principal']),
            rate_percent=parse_amount(fields['rate']),
            time_years=parse_amount(fields['time']),
            frequency_per_year=normalize_frequency(fields['frequency']),
        )
        result = compute(data, compound=True)
        logger.debug("Compound interest for %s: %s", data, result)
        body = _result_body(result)
        body['frequency'] = data.frequency_per_year
        return jsonify(body)

    return app


app = create_app()

if __name__ == '__main__':
    app.run(host=config.HOST, port=config.PORT, debug=False)
