import os

from dotenv import load_dotenv

from storeadmin.services.env_utils import parse_token_pairs, sanitize_env_value

load_dotenv()


class Config:
    """Application settings"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'store-admin-secret-key')

    # MongoDB (flask_pymongo reads MONGO_URI)
    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017/store_admin')
    PRODUCTS_COLLECTION = os.getenv('PRODUCTS_COLLECTION', 'products')
    COLLECTIONS_COLLECTION = os.getenv('COLLECTIONS_COLLECTION', 'collections')

    API_PREFIX = '/api'

    # Storefront origin allowed to read product details cross-origin.
    # Example: ECOMMERCE_STORE_URL=https://shop.example.com
    ECOMMERCE_STORE_URL = sanitize_env_value(os.getenv('ECOMMERCE_STORE_URL'))

    # Admin callers allowed to mutate products.
    # Example: API_TOKENS=alice:3f1c...,ci-bot:9ab0...
    API_TOKENS = parse_token_pairs(os.getenv('API_TOKENS'))

    # Upper bound on concurrent collection updates per request
    SYNC_MAX_WORKERS = int(os.getenv('SYNC_MAX_WORKERS', '8'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    FLASK_ENV = os.getenv('FLASK_ENV', 'development')
