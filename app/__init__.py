from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
import logging
from app.config import Config
from app.database import db, init_db
from app.errors import register_error_handlers

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Configurar logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Configurar CORS
    allowed_origins = [
        'http://localhost:5173',  # Vite dev server
        'http://localhost:3000',  # Alternativa
    ]

    # Adicionar origins de variável de ambiente se existir
    env_origins = app.config.get('CORS_ORIGINS', '')
    if env_origins:
        allowed_origins.extend([origin.strip() for origin in env_origins.split(',')])

    CORS(app,
         resources={r"/api/*": {"origins": allowed_origins}},
         supports_credentials=False,  # Não precisa de credentials com Bearer token
         allow_headers=["Content-Type", "Authorization", "X-User-Nome"],
         methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"])

    # Inicializar banco de dados
    db.init_app(app)

    # Inicializar Flask-Migrate
    migrate = Migrate(app, db)

    init_db(app)

    # Handlers de erro (validação 422, não encontrado 404, banco 500)
    register_error_handlers(app)

    from app.routes import cheques
    app.register_blueprint(cheques.cheques_bp)

    from app.routes import financeiros
    app.register_blueprint(financeiros.financeiros_bp)

    # Health check endpoint
    from app.routes import health
    app.register_blueprint(health.bp)

    return app
