from ._dispatcher import HttpRequestProcessor, run_coroutine

__all__ = [
    "HttpRequestProcessor",
    "run_coroutine",
]
