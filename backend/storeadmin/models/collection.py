from typing import Any, Dict

from .identifiers import id_str, iso_datetime


class Collection:
    """Product collection (the reverse side of Product.collections)"""

    MEMBERS_FIELD = 'products'

    def __init__(self, _id, title=None, description=None, image=None,
                 products=None, created_at=None, updated_at=None):
        self._id = _id
        self.title = title
        self.description = description
        self.image = image
        self.products = list(products or [])  # product ObjectIds
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def id(self):
        return self._id

    def to_dict(self) -> Dict[str, Any]:
        return {
            '_id': id_str(self._id),
            'title': self.title,
            'description': self.description,
            'image': self.image,
            'products': [id_str(p) for p in self.products],
            'created_at': iso_datetime(self.created_at),
            'updated_at': iso_datetime(self.updated_at),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Collection':
        return Collection(
            _id=data.get('_id'),
            title=data.get('title'),
            description=data.get('description'),
            image=data.get('image'),
            products=data.get(Collection.MEMBERS_FIELD, []),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at'),
        )
