"""Call sync or async hooks and handlers uniformly."""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler* and await the result if it is awaitable.

    Route handlers and lifespan hooks may be ``def`` or ``async def``;
    everything that calls user code goes through here.
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
