from __future__ import annotations

import inspect
import typing


async def invoke(c: typing.Callable, *args):
    "Call a plain or async callable, awaiting the result when there is one to await."
    result = c(*args)
    if inspect.isawaitable(result):
        return await result
    return result
