"""Order service request and response models.

Field names follow Python conventions; the camelCase names used on the wire
are generated aliases, and models accept either form when parsing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CreateOrderRequest(BaseModel):
    """Body of ``POST /api/orders``.

    No client-side validation is applied: the harness must be able to send
    invalid orders (zero quantity, negative price) to assert 400 responses.
    """

    model_config = _CAMEL_CONFIG

    user_id: str
    product_id: str
    product_name: str
    quantity: int
    price: float

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class UpdateOrderStatusRequest(BaseModel):
    """Body of ``PUT /api/orders/{id}/status``."""

    model_config = _CAMEL_CONFIG

    status: str


class Order(BaseModel):
    """Order as returned by the order service.

    The persisted entity names its identifier ``orderId`` and its total
    ``totalAmount``; both are accepted alongside ``id`` and ``totalPrice``.
    """

    model_config = _CAMEL_CONFIG

    id: str = Field(validation_alias=AliasChoices("id", "orderId", "order_id"))
    user_id: str
    product_id: str
    product_name: str
    quantity: int
    price: float
    total_price: float = Field(
        validation_alias=AliasChoices("totalPrice", "totalAmount", "total_price"),
        serialization_alias="totalPrice",
    )
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SortInfo(BaseModel):
    model_config = _CAMEL_CONFIG

    sorted: bool = False
    unsorted: bool = True
    empty: bool = True


class PageableInfo(BaseModel):
    """Spring ``Pageable`` block of a page response."""

    model_config = _CAMEL_CONFIG

    page_number: int
    page_size: int
    sort: SortInfo = Field(default_factory=SortInfo)
    offset: int = 0
    paged: bool = True
    unpaged: bool = False


class OrderPage(BaseModel):
    """Page of orders.

    The list endpoints of the deployed order service return either a Spring
    ``Page`` object or a bare JSON list of orders. ``from_payload`` accepts both
    and synthesises page metadata for the bare list from the requested
    page and size; ``total_elements`` and ``total_pages`` are then unknown.
    A bare list longer than the requested size is the complete, unpaged
    result and becomes a single page holding all of it.
    """

    model_config = _CAMEL_CONFIG

    content: list[Order] = Field(default_factory=list)
    pageable: PageableInfo
    total_pages: int | None = None
    total_elements: int | None = None
    last: bool = True
    size: int
    number: int
    sort: SortInfo = Field(default_factory=SortInfo)
    number_of_elements: int = 0
    first: bool = True
    empty: bool = True

    @classmethod
    def from_payload(cls, payload: Any, page: int = 0, size: int = 10) -> OrderPage:
        if isinstance(payload, dict):
            return cls.model_validate(payload)

        content = [Order.model_validate(item) for item in payload]
        if len(content) > size:
            # More items than requested: the endpoint ignored paging and returned everything
            return cls(
                content=content,
                pageable=PageableInfo(
                    page_number=0, page_size=len(content), paged=False, unpaged=True
                ),
                total_pages=1,
                total_elements=len(content),
                last=True,
                size=len(content),
                number=0,
                number_of_elements=len(content),
                first=True,
                empty=False,
            )

        return cls(
            content=content,
            pageable=PageableInfo(page_number=page, page_size=size, offset=page * size),
            last=len(content) < size,
            size=size,
            number=page,
            number_of_elements=len(content),
            first=page == 0,
            empty=not content,
        )
