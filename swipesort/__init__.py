import os
import logging

from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_caching import Cache
from werkzeug.exceptions import HTTPException
from config import config

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
cache = Cache()

def create_app(config_name=None, overrides=None):
    """Application factory function"""
    app = Flask(__name__)

    # Load configuration
    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, app.config['LOG_LEVEL'], logging.INFO))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cache.init_app(app)
    CORS(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})

    # Session/track repository and file store, built once per app
    from swipesort.services import FileStore, MemStorage, DatabaseStorage
    files = FileStore(app.config['UPLOADS_DIR'])
    backend = app.config['STORAGE_BACKEND']
    if backend == 'database':
        with app.app_context():
            db.create_all()
        storage = DatabaseStorage(files)
    elif backend == 'memory':
        storage = MemStorage(files)
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")
    app.extensions['swipesort_storage'] = storage
    app.logger.info("Using %s storage, uploads in %s", backend, files.root_dir)

    # Register blueprints
    from swipesort.routes.sessions import sessions_bp
    from swipesort.routes.tracks import tracks_bp
    app.register_blueprint(sessions_bp, url_prefix='/api/sessions')
    app.register_blueprint(tracks_bp, url_prefix='/api/tracks')

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    return app
