from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def init_db(app):
    """Registra os models no metadata; o schema é criado pelas migrations"""
    with app.app_context():
        from app import models  # noqa: F401
