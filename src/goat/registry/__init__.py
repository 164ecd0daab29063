# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser registry facade.

```python
from goat.registry import ParserRegistry

ParserRegistry.names()  # ("csv", "json", "toml", ...)
ParserRegistry.get("yml").name  # "yaml"
```

Mutation (overlay-only; process-global state):

```python
ParserRegistry.register(my_parser)
ParserRegistry.unregister("myfmt")
```
"""

from __future__ import annotations

from .parsers import ParserMeta, ParserRegistry

__all__ = ["ParserMeta", "ParserRegistry"]
