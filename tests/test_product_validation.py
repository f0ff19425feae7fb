"""
Tests for product update payload validation.
"""

import pytest
from bson import ObjectId

from storeadmin.services.errors import InvalidInput
from storeadmin.services.product_validation import validate_product_payload


def _fields_of(payload):
    with pytest.raises(InvalidInput) as excinfo:
        validate_product_payload(payload)
    return excinfo.value.fields


def test_clean_payload_is_normalized(payload, ids):
    payload['title'] = '  Linen shirt v2 '
    payload['tags'] = ['summer', 'summer', ' linen ', '']
    payload['collections'].append(str(ids['B']))
    payload['price'] = '55.50'

    fields = validate_product_payload(payload)

    assert fields['title'] == 'Linen shirt v2'
    assert fields['tags'] == ['summer', 'linen']
    assert fields['collections'] == [ids['B'], ids['C']]
    assert fields['price'] == 55.5


def test_zero_price_is_allowed(payload):
    payload['price'] = 0
    assert validate_product_payload(payload)['price'] == 0.0


@pytest.mark.parametrize('value', [None, '', 'abc', -1, True, float('nan'), 10 ** 400, -10 ** 400])
def test_bad_price(payload, value):
    payload['price'] = value
    assert _fields_of(payload) == ['price']


@pytest.mark.parametrize('field', ['title', 'description', 'category', 'media', 'price', 'expense'])
def test_required_fields(payload, field):
    del payload[field]
    assert _fields_of(payload) == [field]


def test_empty_media_is_rejected(payload):
    payload['media'] = []
    assert _fields_of(payload) == ['media']


def test_optional_lists_default_to_empty(payload):
    for name in ('collections', 'tags', 'sizes', 'colors'):
        del payload[name]
    fields = validate_product_payload(payload)
    assert fields['collections'] == []
    assert fields['tags'] == fields['sizes'] == fields['colors'] == []


def test_bad_collection_id(payload):
    payload['collections'] = [str(ObjectId()), 'nope']
    assert _fields_of(payload) == ['collections']


def test_collections_must_be_a_list(payload):
    payload['collections'] = 'abc'
    assert _fields_of(payload) == ['collections']


def test_reports_every_problem(payload):
    payload['title'] = ''
    payload['sizes'] = 'M'
    del payload['expense']
    assert _fields_of(payload) == ['title', 'expense', 'sizes']


def test_body_must_be_an_object():
    assert _fields_of(['title']) == ['body']
