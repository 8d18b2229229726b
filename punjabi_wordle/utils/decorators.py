"""
Authentication Decorators

Contains the decorator guarding admin HTTP endpoints.
"""

from functools import wraps
from flask import g, request, jsonify


def require_admin(f):
    """
    Decorator to require the admin credential for protected HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.admin_service import get_admin_service

        admin_service = get_admin_service()

        # Get credential from Authorization header
        credential = None
        auth_header = request.headers.get('Authorization')
        if auth_header and auth_header.startswith('Bearer '):
            credential = auth_header[len('Bearer '):].strip()

        result = admin_service.verify_credential(credential)
        if not result['success']:
            return jsonify({
                'success': False,
                'error_type': 'unauthorized',
                'error': result['error']
            }), 401

        g.admin_verified = True
        return f(*args, **kwargs)

    return decorated_function
