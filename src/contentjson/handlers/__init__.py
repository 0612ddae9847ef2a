"""Request handlers mapping content to RenderResult.

Submodules:
    result  - RenderResult
    content - ContentJsonHandler (structured content orchestrator)
    chain   - JsonHandler protocol, JsonHandlerChain

Python 3.13+.
"""

from .chain import JsonHandler, JsonHandlerChain
from .content import ContentJsonHandler
from .result import RenderResult

__all__ = [
    "ContentJsonHandler",
    "JsonHandler",
    "JsonHandlerChain",
    "RenderResult",
]
