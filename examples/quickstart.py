"""Quickstart example for contentjson.

This example renders one piece of structured content the ways a JSON
endpoint would: the full document, one locale, and one value by path.

Note: Examples print RenderResult.to_json() bodies. A transport layer would
also answer with int(result.status) as the HTTP status code.
"""

from datetime import date
from decimal import Decimal

from contentjson import (
    ContentDefinition,
    ContentJsonHandler,
    ContentLink,
    JsonHandlerChain,
    MappingContent,
    RenderSettings,
    RequestContext,
    StaticMetadata,
)

article = MappingContent(
    ContentDefinition("article"),
    {
        "en": {
            "title": "Hello",
            "published": date(2024, 5, 1),
            "price": Decimal("9.90"),
            "related": [ContentLink("/news/other.html")],
        },
        "de": {
            "title": "Hallo",
            "published": date(2024, 5, 1),
            "price": Decimal("9.90"),
            "related": [],
        },
    },
)
metadata = StaticMetadata(
    resource_path="/sites/default/news/hello.xml",
    resource_properties={"Title": "Hello"},
    resource_attributes={"type": "article"},
)
handler = ContentJsonHandler()

# Example 1: Full document
print("=" * 50)
print("Example 1: Full Document")
print("=" * 50)

result = handler.render_json(RequestContext(article, metadata=metadata))
print(result.to_json(indent=2))
# Output: {"en": {...}, "de": {...}, "properties": {...}, "attributes": {...},
#          "locales": ["en", "de"], "path": "...", "link": "..."}

# Example 2: One locale, negotiated
print("\n" + "=" * 50)
print("Example 2: Negotiated Locale")
print("=" * 50)

context = RequestContext(
    article, {"locale": "en-US"}, link_base="https://example.org"
)
print(handler.render_json(context).to_json())
# Output: {"title":"Hello","published":"2024-05-01","price":"9.90",
#          "related":[{"path":"/news/other.html","link":"https://example.org/news/other.html"}]}

# Example 3: One value by path
print("\n" + "=" * 50)
print("Example 3: Path Query")
print("=" * 50)

for path in ("title", "related[0]/path", "missing/field"):
    result = handler.render_json(RequestContext(article, {"locale": "de", "path": path}))
    print(f"{path!r:20} -> {int(result.status)} {result.to_json()}")
# Output:
# 'title'              -> 200 "Hallo"
# 'related[0]/path'    -> 404 {"error":"Path not found","status":404}
# 'missing/field'      -> 404 {"error":"Path not found","status":404}

# Example 4: Errors
print("\n" + "=" * 50)
print("Example 4: Error Results")
print("=" * 50)

for params in ({"path": "title"}, {"locale": "fr"}):
    result = handler.render_json(RequestContext(article, params))
    print(f"{params} -> {int(result.status)} {result.message}")
# Output:
# {'path': 'title'} -> 400 path parameter requires locale parameter
# {'locale': 'fr'} -> 404 Locale not found

# Example 5: Rendering strategy declared by the content type
print("\n" + "=" * 50)
print("Example 5: Flat Renderer")
print("=" * 50)

teaser = MappingContent(
    ContentDefinition(
        "teaser", RenderSettings("flat", {"separator": "/", "date-format": "millis"})
    ),
    {"en": {"text": {"head": "Hi", "body": "There"}, "at": date(1970, 1, 2)}},
)
chain = JsonHandlerChain([handler])
print(chain.render_json(RequestContext(teaser, {"locale": "en"})).to_json())
# Output: {"text/head":"Hi","text/body":"There","at":"86400000"}

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
