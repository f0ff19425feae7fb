from .collection import Collection
from .product import Product

__all__ = ['Collection', 'Product']
