from flask import Blueprint, current_app, jsonify, request
from flask_cors import cross_origin

from storeadmin.services.errors import CatalogError

products_bp = Blueprint('products', __name__)


def _service():
    return current_app.extensions['product_service']


def _caller_id():
    return current_app.extensions['authorizer'].current_caller_id()


def _error_response(exc: Exception, tag: str):
    """Map service errors to responses; hide details of anything unexpected."""
    if isinstance(exc, CatalogError):
        if exc.status >= 500:
            current_app.logger.error('[%s] %s', tag, exc.message)
        return jsonify(exc.to_dict()), exc.status
    current_app.logger.exception('[%s] unexpected error', tag)
    return jsonify({
        'success': False,
        'error': 'INTERNAL_ERROR',
        'message': 'Internal error'
    }), 500


@products_bp.route('/<product_id>', methods=['GET'])
@cross_origin(methods=['GET'], allow_headers=['Content-Type'])
def get_product(product_id):
    """Product detail with collections expanded"""
    try:
        product = _service().get_product(product_id)
        return jsonify({
            'success': True,
            'data': product.to_dict(),
            'message': 'Product loaded'
        })
    except Exception as e:
        return _error_response(e, 'product_id_GET')


@products_bp.route('/<product_id>', methods=['POST'])
def update_product(product_id):
    """Replace a product and resync its collections"""
    try:
        payload = request.get_json(silent=True)
        result = _service().update_product(product_id, payload, _caller_id())
        return jsonify({
            'success': True,
            'data': result.to_dict(),
            'message': 'Product updated'
        })
    except Exception as e:
        return _error_response(e, 'product_id_POST')


@products_bp.route('/<product_id>', methods=['DELETE'])
def delete_product(product_id):
    """Delete a product and unlink it from its collections"""
    try:
        product = _service().delete_product(product_id, _caller_id())
        return jsonify({
            'success': True,
            'data': {'_id': str(product.id)},
            'message': 'Product deleted'
        })
    except Exception as e:
        return _error_response(e, 'product_id_DELETE')
