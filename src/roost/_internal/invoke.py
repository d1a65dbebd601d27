"""Invoke helpers: call sync or async delegates uniformly.

Route delegates (``prepare`` and ``respond``) can be ``def`` or
``async def``. The sync/async check lives here and nowhere else.

Usage::

    from roost._internal.invoke import invoke

    result = await invoke(route.respond, request, response, services)
"""

import inspect
from typing import Any


async def invoke(delegate: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a delegate and await the result if it is awaitable.

    Works with both sync and async callables::

        # sync
        def respond(request, response, services):
            return {"id": request.session["sub"]}

        # async
        async def respond(request, response, services):
            return await services.users.get(request.session["sub"])
    """
    result = delegate(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
