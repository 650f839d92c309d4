"""Item CRUD endpoints.

This module implements the ownership-scoped item endpoints:
- GET    /items        - List the caller's items
- POST   /items        - Create an item
- GET    /items/{id}   - Get one of the caller's items
- PUT    /items/{id}   - Partially update one of the caller's items
- DELETE /items/{id}   - Delete one of the caller's items

Every route requires a bearer token (see authenticate below). Items owned by
other users answer 404, the same as missing ones.
"""

from flask import Blueprint, g, jsonify, request

from ..auth.decorators import _authenticate_request
from ..db import get_core
from ..exceptions import ResourceNotFound
from ..items import Item, ItemCreate, ItemService, ItemUpdate
from .validation import validate_request

# Create Blueprint
items_bp = Blueprint("items", __name__, url_prefix="/items")


@items_bp.before_request
def authenticate():
    """
    Require authentication for all item endpoints.

    CORS preflight requests carry no credentials and are let through; the
    CORS extension answers them.

    Raises:
        MissingToken: If no bearer token is present
        InvalidToken: If the token does not verify
    """
    if request.method == "OPTIONS":
        return None
    _authenticate_request()


def _parse_id(item_id: str) -> int:
    """Path ids that are not integers can never name an item."""
    try:
        return int(item_id)
    except ValueError:
        raise ResourceNotFound()


def _service() -> ItemService:
    return ItemService(get_core().items)


def _item_response(item: Item) -> dict:
    """Serialize an item with its wire field names."""
    return item.model_dump(by_alias=True)


@items_bp.get("")
def list_items():
    """
    List the caller's items.

    Returns:
        200: Array of items, in creation order
    """
    items = _service().list(g.user)
    return jsonify([_item_response(item) for item in items])


@items_bp.post("")
@validate_request
def create_item(data: ItemCreate):
    """
    Create an item owned by the caller.

    Request Body (ItemCreate):
        - title: str (required, non-empty)
        - description: str (default: "")

    Returns:
        201: Created item
        400: Title missing
    """
    item = _service().create(g.user, data)
    return jsonify(_item_response(item)), 201


@items_bp.get("/<item_id>")
def get_item(item_id: str):
    """
    Get one of the caller's items.

    Returns:
        200: Item
        404: Item not found (or not owned by the caller)
    """
    item = _service().get(g.user, _parse_id(item_id))
    return jsonify(_item_response(item))


@items_bp.put("/<item_id>")
@validate_request
def update_item(item_id: str, data: ItemUpdate):
    """
    Update one of the caller's items.

    Only provided fields are updated; an explicit ``"completed": false``
    is applied.

    Request Body (ItemUpdate):
        All fields optional:
        - title: str (non-empty if given)
        - description: str
        - completed: bool

    Returns:
        200: Updated item
        400: Empty title
        404: Item not found (or not owned by the caller)
    """
    item = _service().update(g.user, _parse_id(item_id), data)
    return jsonify(_item_response(item))


@items_bp.delete("/<item_id>")
def delete_item(item_id: str):
    """
    Delete one of the caller's items.

    Returns:
        200: {"message": ..., "deletedItem": item}
        404: Item not found (or not owned by the caller)
    """
    item = _service().delete(g.user, _parse_id(item_id))
    return jsonify({
        "message": "Item deleted successfully",
        "deletedItem": _item_response(item),
    })
