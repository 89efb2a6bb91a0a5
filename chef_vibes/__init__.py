from datetime import timedelta
import logging
import os

from dotenv import load_dotenv
from flask import Flask

from .api import auth_bp, category_bp, kitchen_bp, recipe_bp
from .errors import register_error_handlers
from .extensions import cors, jwt, store
from .json_provider import MongoJSONProvider

load_dotenv()

DEFAULT_MONGO_HOST = 'cluster0.3hdabzk.mongodb.net'


def mongo_uri(config):
    """Connection string built from the DB_USER/DB_PASS credentials and MONGO_HOST."""
    return (
        f"mongodb+srv://{config['DB_USER']}:{config['DB_PASS']}"
        f"@{config['MONGO_HOST']}/?retryWrites=true&w=majority"
    )


def create_app(test_config=None):
    app = Flask(__name__)
    app.json = MongoJSONProvider(app)

    app.config.update(
        PORT=int(os.getenv('PORT', 5000)),
        DB_USER=os.getenv('DB_USER'),
        DB_PASS=os.getenv('DB_PASS'),
        MONGO_HOST=os.getenv('MONGO_HOST', DEFAULT_MONGO_HOST),
        MONGO_URI=os.getenv('MONGO_URI'),
        MONGO_DB_NAME=os.getenv('MONGO_DB_NAME', 'chef-vibes-db'),
        MONGO_PING_ON_STARTUP=True,
        ACCESS_TOKEN=os.getenv('ACCESS_TOKEN'),
        CORS_ORIGIN=os.getenv('CORS_ORIGIN', 'http://localhost:5173'),
        LOG_LEVEL=os.getenv('LOG_LEVEL', 'INFO'),
        JWT_TOKEN_LOCATION=['cookies'],
        JWT_ACCESS_COOKIE_NAME='token',
        JWT_COOKIE_SECURE=False,
        JWT_COOKIE_CSRF_PROTECT=False,
        JWT_ACCESS_TOKEN_EXPIRES=timedelta(hours=10),
    )
    if test_config:
        app.config.update(test_config)
    if not app.config['MONGO_URI']:
        app.config['MONGO_URI'] = mongo_uri(app.config)

    logging.basicConfig(level=app.config['LOG_LEVEL'])

    if not app.config['ACCESS_TOKEN']:
        raise RuntimeError("ACCESS_TOKEN is not set; refusing to start without a token signing secret")
    app.config['JWT_SECRET_KEY'] = app.config['ACCESS_TOKEN']
    app.logger.info("Config loaded")

    cors.init_app(app, supports_credentials=True, origins=[app.config['CORS_ORIGIN']])
    jwt.init_app(app)
    store.init_app(app)
    app.logger.info(f"Collection store bound to database {app.config['MONGO_DB_NAME']}")

    register_error_handlers(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(category_bp)
    app.register_blueprint(recipe_bp)
    app.register_blueprint(kitchen_bp)

    @app.route('/', methods=['GET'])
    def index():
        return "chef vibes is running"

    app.logger.info("App creation complete")
    return app
