"""Base models and the resource-path capability.

Every queryable entity knows the REST path of its collection and of a single
item. Top-level resources take no parent; nested resources (trips under a
route) embed the parent's numeric key in the path.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class TransitlandModel(BaseModel):
    """Immutable value object deserialized from a Transitland response."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class TransitlandObject(TransitlandModel):
    """An entity with its own REST endpoint.

    Subclasses set `rest_noun`. Nested resources override `query_path` and
    `by_id_path` to require a parent key.
    """

    rest_noun: ClassVar[str]
    # Whether the collection endpoint accepts the `spec` query filter
    filters_by_spec: ClassVar[bool] = False

    @classmethod
    def query_path(cls, parent: int | None = None) -> str:
        """Path of the collection, relative to the API base URL."""
        if parent is not None:
            raise ValueError(f"{cls.__name__} is a top-level resource and takes no parent")
        return cls.rest_noun

    @classmethod
    def by_id_path(cls, parent: int | None = None) -> str:
        """Path under which single items are looked up by key."""
        if parent is not None:
            raise ValueError(f"{cls.__name__} is a top-level resource and takes no parent")
        return cls.rest_noun
