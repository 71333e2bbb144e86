import datetime
from typing import Any

from pydantic import BaseModel

from voicerest.client.resource_set import ResourceSet

# Identifying fields come first in the output.
_FIXED_WEIGHTS = {
    'sid': 0,
    'account_sid': 1,
    'call_sid': 2,
}
_DEFAULT_WEIGHT = 99999


def normalize(content: Any, sort_keys: bool = True) -> Any:
    """
    Normalize the content for display

    .. note:: This is not designed for two-way data conversion.
    """
    if isinstance(content, BaseModel):
        return normalize(content.model_dump(), sort_keys=sort_keys)
    elif isinstance(content, dict):
        properties = (
            sorted(content.keys(), key=lambda k: f'{_FIXED_WEIGHTS.get(k, _DEFAULT_WEIGHT):0>8}//{k}')
            if sort_keys
            else list(content.keys())
        )

        return {
            p_name: normalize(content[p_name], sort_keys=sort_keys)
            for p_name in properties
        }
    elif isinstance(content, (tuple, list, set, ResourceSet)):
        return [normalize(i, sort_keys=sort_keys) for i in content]
    elif isinstance(content, (datetime.datetime, datetime.date, datetime.time)):
        return content.isoformat()
    else:
        return content
