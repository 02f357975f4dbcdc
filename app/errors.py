"""
Handlers de erro centralizados.

Traduz as exceções de domínio para o envelope {status, message} com o
status HTTP correto. Detalhes internos não são expostos ao cliente.
"""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from app.database import db
from app.exceptions import CustomErrorException, ValidationError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, **extra):
    """Monta o envelope de erro padrão"""
    body = {'status': False, 'message': message}
    body.update(extra)
    return jsonify(body), status_code


def register_error_handlers(app):
    """Registra os handlers de erro na aplicação Flask"""

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc):
        logger.warning(f"Validação falhou: {exc.fields()}")
        return error_response(exc.status_code, exc.message, errors=exc.errors)

    @app.errorhandler(CustomErrorException)
    def handle_custom_error(exc):
        logger.warning(f"Erro de negócio ({exc.status_code}): {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(exc):
        db.session.rollback()
        logger.exception("Erro ao acessar o banco de dados")
        return error_response(500, 'Erro ao acessar o banco de dados')

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return error_response(exc.code, exc.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Erro não tratado")
        return error_response(500, 'Erro interno do servidor')
