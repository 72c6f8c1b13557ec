"""Changelog routes - what's new, full history, version comparison"""
from flask import Blueprint, jsonify, request
from whatsnew.config import APP_VERSION
from whatsnew.services.changelog_service import (
    build_changelog,
    build_whats_new,
    compare_versions,
    parse_catalog,
)
from whatsnew.utils.json_utils import clean_for_json
from whatsnew.utils.logger import logger
from whatsnew.utils.error_handler import ValidationError
from whatsnew.utils.validators import sanitize_input, validate_last_seen, validate_version

bp = Blueprint('changelog', __name__)


def _json_body() -> dict:
    """Request body as a dict, ValidationError otherwise"""
    body = request.get_json(silent=True)
    if body is None:
        raise ValidationError('JSON body with a catalog is required')
    if not isinstance(body, dict):
        raise ValidationError('JSON body must be an object')
    return body


@bp.route('/api/whats-new', methods=['POST'])
def whats_new():
    """
    POST body: { "catalog": [ {version, title, changes}, ... ], "last_seen": "1.1.0" | null, "fallback": true }
    Returns: { "success": true, "entries": [...], "count": n, "is_fallback": bool }
    """
    body = _json_body()
    catalog = parse_catalog(body.get('catalog'))

    last_seen = body.get('last_seen')
    if not validate_last_seen(last_seen):
        raise ValidationError('last_seen must be a version string or null', {'last_seen': str(last_seen)[:64]})

    fallback = body.get('fallback', True)
    if not isinstance(fallback, bool):
        raise ValidationError('fallback must be a boolean')

    logger.debug(f"whats_new: {len(catalog)} releases, last_seen={last_seen!r}")
    result = build_whats_new(catalog, last_seen, fallback=fallback)
    return jsonify(clean_for_json({'success': True, **result}))


@bp.route('/api/changelog', methods=['POST'])
def changelog():
    """
    POST body: { "catalog": [ {version, title, changes}, ... ] }
    Returns: { "success": true, "entries": [...newest first], "count": n }
    """
    body = _json_body()
    catalog = parse_catalog(body.get('catalog'))
    return jsonify(clean_for_json({'success': True, **build_changelog(catalog)}))


@bp.route('/api/version/compare')
def version_compare():
    """Compare two versions: /api/version/compare?lhs=1.2&rhs=1.2.0"""
    lhs = sanitize_input(request.args.get('lhs', ''), max_length=64)
    rhs = sanitize_input(request.args.get('rhs', ''), max_length=64)

    invalid = {name: value for name, value in (('lhs', lhs), ('rhs', rhs)) if not validate_version(value)}
    if invalid:
        raise ValidationError('lhs and rhs must be dotted numeric versions', invalid)

    return jsonify(compare_versions(lhs, rhs))


@bp.route('/api/health')
def health():
    """Liveness check"""
    return jsonify({'status': 'ok', 'version': APP_VERSION})
