"""
Jammit.entity
-------------------------
This module provides the Entity class

Key Features:
    - Provides a functionality wrapper for Beanie Documents
"""


class Entity():
    """
    Jammit.Entity
    -------
    A class representing a jammit application entity.
    An Entity is a wrapper for Beanie ODM Documents that adds behavior to them.

    Key Features:
    - `__init__`: Initializes an entity object and assigns the passed document
    - '__getattr__': Forwards attribute reads to the document
    - 'exists': Whether a document is assigned
    - 'save': Passes the persistence call to the document
    """

    def __init__(self, document=None):
        self.doc = document

    def __getattr__(self, name):
        """Forward attribute access to the document, but not function calls"""
        if name == "doc":
            raise AttributeError(name)
        attr = getattr(self.doc, name)
        if callable(attr):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'")
        return attr

    @property
    def exists(self) -> bool:
        """Check if the document exists in the database."""
        return self.doc is not None

    async def save(self):
        await self.doc.save()
        return self
