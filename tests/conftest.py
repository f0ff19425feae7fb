import os
import sys

import pytest
from bson import ObjectId

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'backend'))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fakes import InMemoryRecordStore  # noqa: E402

ADMIN_TOKEN = 'admin-secret-token'


@pytest.fixture
def ids():
    """Stable ids for a product P and collections A, B, C."""
    return {name: ObjectId() for name in ('P', 'A', 'B', 'C')}


@pytest.fixture
def stores(ids):
    """Product P in collections A and B; C exists but is empty."""
    products = InMemoryRecordStore('products', [{
        '_id': ids['P'],
        'title': 'Linen shirt',
        'description': 'Relaxed fit',
        'media': ['https://cdn.example.com/shirt.jpg'],
        'category': 'Shirts',
        'collections': [ids['A'], ids['B']],
        'tags': ['summer'],
        'sizes': ['M', 'L'],
        'colors': ['white'],
        'price': 49.0,
        'expense': 20.0,
    }])
    collections = InMemoryRecordStore('collections', [
        {'_id': ids['A'], 'title': 'Summer', 'products': [ids['P']]},
        {'_id': ids['B'], 'title': 'Basics', 'products': [ids['P']]},
        {'_id': ids['C'], 'title': 'Sale', 'products': []},
    ])
    return products, collections


@pytest.fixture
def payload(ids):
    return {
        'title': 'Linen shirt v2',
        'description': 'Relaxed fit, new buttons',
        'media': ['https://cdn.example.com/shirt-2.jpg'],
        'category': 'Shirts',
        'collections': [str(ids['B']), str(ids['C'])],
        'tags': ['summer', 'linen'],
        'sizes': ['S', 'M'],
        'colors': ['white', 'sand'],
        'price': 55,
        'expense': 21.5,
    }


@pytest.fixture
def app(stores):
    from storeadmin import create_app

    return create_app(
        config_overrides={
            'TESTING': True,
            'API_TOKENS': {ADMIN_TOKEN: 'admin'},
            'ECOMMERCE_STORE_URL': 'https://shop.example.com',
        },
        stores=stores,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'Authorization': f'Bearer {ADMIN_TOKEN}'}
