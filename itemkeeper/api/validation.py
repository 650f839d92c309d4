"""Request body validation.

@validate_request looks at the view's type hints: every parameter annotated
with a pydantic model is filled from the request body (JSON, or form data as
a fallback). Path parameters pass through untouched.
"""

import logging
from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def _request_payload() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict() if request.form else {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def validate_request(f):
    """
    Parse the request body into the pydantic model(s) the view expects.

    Raises:
        ValidationError: If the body is not an object or fails validation

    Example:
    ```python
    @items_bp.put("/<item_id>")
    @validate_request
    def update_item(item_id: str, data: ItemUpdate):
        ...
    ```
    """
    hints = get_type_hints(f)
    model_params = {
        name: hint
        for name, hint in hints.items()
        if name != "return" and isinstance(hint, type) and issubclass(hint, BaseModel)
    }

    @wraps(f)
    def wrapper(*args, **kwargs):
        if model_params:
            payload = _request_payload()
            for name, model in model_params.items():
                try:
                    kwargs[name] = model.model_validate(payload)
                except PydanticValidationError as e:
                    logger.debug(f"Invalid body for {request.path}: {e.error_count()} error(s)")
                    raise ValidationError(
                        "Invalid request data",
                        {"errors": e.errors(include_url=False, include_context=False)}
                    )
        return f(*args, **kwargs)

    return wrapper
