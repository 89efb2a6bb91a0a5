import atexit
import logging
import weakref

from flask import current_app
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)


class CollectionStore:
    """Owns the MongoDB client and hands out the app's collections.

    Follows the Flask extension pattern: create once at import time, bind to
    an app with ``init_app``. Handlers reach the collections through the
    current app context, so nothing holds a global client.
    """

    CATEGORIES = 'categories'
    RECIPES = 'recipies'
    KITCHEN = 'kitchen'

    def __init__(self):
        self._apps = weakref.WeakSet()
        self._exit_hook_registered = False

    def init_app(self, app):
        client = app.config.get('MONGO_CLIENT')
        if client is None:
            client = MongoClient(
                app.config['MONGO_URI'],
                server_api=ServerApi('1', strict=True, deprecation_errors=True),
            )

        state = {'client': client, 'db': client[app.config['MONGO_DB_NAME']]}
        app.extensions['collection_store'] = state

        if app.config.get('MONGO_PING_ON_STARTUP', True):
            self.ping(state['client'])
        self.ensure_indexes(state['db'])

        self._apps.add(app)
        if not self._exit_hook_registered:
            atexit.register(self.close_all)
            self._exit_hook_registered = True

    @staticmethod
    def ping(client):
        try:
            client.admin.command('ping')
            logger.info("Pinged your deployment. You successfully connected to MongoDB!")
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")

    @classmethod
    def ensure_indexes(cls, db):
        # One kitchen entry per (email, recipieId)
        try:
            db[cls.KITCHEN].create_index(
                [('email', ASCENDING), ('recipieId', ASCENDING)],
                unique=True,
                name='email_recipieId_unique',
            )
        except PyMongoError as e:
            logger.warning(f"Could not create kitchen unique index: {e}")

    def close(self, app=None):
        app = app or current_app._get_current_object()
        self._apps.discard(app)
        state = app.extensions.pop('collection_store', None)
        if state is not None:
            state['client'].close()
            logger.info("MongoDB client closed")

    def close_all(self):
        """Shutdown hook: close the client of every app still bound."""
        for app in list(self._apps):
            self.close(app)

    @staticmethod
    def _db():
        return current_app.extensions['collection_store']['db']

    @property
    def categories(self):
        return self._db()[self.CATEGORIES]

    @property
    def recipes(self):
        return self._db()[self.RECIPES]

    @property
    def kitchen(self):
        return self._db()[self.KITCHEN]


store = CollectionStore()
jwt = JWTManager()
cors = CORS()
