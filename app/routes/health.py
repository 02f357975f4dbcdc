"""
Endpoint de health check geral da API
"""
import logging
from flask import Blueprint, jsonify
from datetime import datetime
from sqlalchemy import text
from app.database import db

logger = logging.getLogger(__name__)

bp = Blueprint('health', __name__, url_prefix='/api')


@bp.route('/health', methods=['GET'])
def health_check():
    """Verifica se a API está online e se o banco de dados responde"""
    try:
        db.session.execute(text('SELECT 1'))
    except Exception:
        db.session.rollback()
        logger.exception("Health check: banco de dados não respondeu")
        return jsonify({
            'status': False,
            'message': 'API online, mas o banco de dados não respondeu',
            'timestamp': datetime.utcnow().isoformat()
        }), 503

    return jsonify({
        'status': True,
        'message': 'API online e banco de dados acessível',
        'timestamp': datetime.utcnow().isoformat()
    }), 200
