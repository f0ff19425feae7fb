import logging

from flask import Flask
from flask_pymongo import PyMongo

from storeadmin.config import Config

mongo = PyMongo()


def _setup_logging(level: str):
    """Attach a console handler to the root logger once."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    ))
    root.addHandler(handler)


def _mongo_stores(app):
    """Open the shared MongoClient and wrap the two collections."""
    from storeadmin.services.record_store import MongoRecordStore

    mongo.init_app(app)
    if mongo.db is None:
        raise RuntimeError('MONGO_URI must name a database, e.g. mongodb://host:27017/store_admin')
    return (
        MongoRecordStore(mongo.db[app.config['PRODUCTS_COLLECTION']]),
        MongoRecordStore(mongo.db[app.config['COLLECTIONS_COLLECTION']]),
    )


def create_app(config_overrides=None, stores=None):
    """Create the Flask app.

    ``stores`` is an optional ``(product_store, collection_store)`` pair; when
    omitted both are opened on MongoDB from ``MONGO_URI``.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    _setup_logging(app.config.get('LOG_LEVEL', 'INFO'))

    api_prefix = app.config.get('API_PREFIX', '/api')

    # Origins allowed by the cross_origin decorator on the GET route
    store_url = app.config.get('ECOMMERCE_STORE_URL')
    app.config['CORS_ORIGINS'] = [store_url] if store_url else []

    from storeadmin.services.auth import TokenAuthorizer
    from storeadmin.services.product_service import ProductService

    product_store, collection_store = stores if stores is not None else _mongo_stores(app)
    app.extensions['product_service'] = ProductService.from_stores(
        product_store,
        collection_store,
        max_workers=app.config.get('SYNC_MAX_WORKERS', 8),
    )
    app.extensions['authorizer'] = TokenAuthorizer(app.config.get('API_TOKENS'))

    from storeadmin.routes.products import products_bp

    app.register_blueprint(products_bp, url_prefix=f'{api_prefix}/products')

    return app
