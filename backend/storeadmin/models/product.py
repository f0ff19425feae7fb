from typing import Any, Dict, List, Optional

from .identifiers import id_str, iso_datetime


class Product:
    """Store product"""

    # Fields replaced wholesale by an update
    EDITABLE_FIELDS = (
        'title',
        'description',
        'media',
        'category',
        'collections',
        'tags',
        'sizes',
        'colors',
        'price',
        'expense',
    )

    def __init__(self, _id, title, description, media, category,
                 collections=None, tags=None, sizes=None, colors=None,
                 price=0, expense=0, created_at=None, updated_at=None):
        self._id = _id
        self.title = title
        self.description = description
        self.media = list(media or [])
        self.category = category
        self.collections = list(collections or [])  # collection ObjectIds
        self.tags = list(tags or [])
        self.sizes = list(sizes or [])
        self.colors = list(colors or [])
        self.price = price
        self.expense = expense
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def id(self):
        return self._id

    def to_dict(self, collections: Optional[List[Any]] = None) -> Dict[str, Any]:
        """Serialize for API responses.

        ``collections`` are the resolved Collection records; without them the
        raw ids are emitted.
        """
        if collections is None:
            collection_values = [id_str(c) for c in self.collections]
        else:
            collection_values = [c.to_dict() for c in collections]
        return {
            '_id': id_str(self._id),
            'title': self.title,
            'description': self.description,
            'media': self.media,
            'category': self.category,
            'collections': collection_values,
            'tags': self.tags,
            'sizes': self.sizes,
            'colors': self.colors,
            'price': self.price,
            'expense': self.expense,
            'created_at': iso_datetime(self.created_at),
            'updated_at': iso_datetime(self.updated_at),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Product':
        """Build a product from a stored document"""
        return Product(
            _id=data.get('_id'),
            title=data.get('title'),
            description=data.get('description'),
            media=data.get('media', []),
            category=data.get('category'),
            collections=data.get('collections', []),
            tags=data.get('tags', []),
            sizes=data.get('sizes', []),
            colors=data.get('colors', []),
            price=data.get('price', 0),
            expense=data.get('expense', 0),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at'),
        )
