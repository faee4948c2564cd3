from urllib.parse import urlencode

from pydantic import BaseModel


def to_query_string(model: BaseModel) -> str:
    """Encode the set scalar fields of ``model`` in declared order, e.g. ``to=%2B1&len=6``."""
    params = [
        (key, value)
        for key, value in model.model_dump(
            mode="json", by_alias=True, exclude_none=True
        ).items()
        if not isinstance(value, (dict, list))
    ]
    return urlencode(params)
