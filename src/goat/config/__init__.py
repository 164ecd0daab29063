# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat configuration: immutable `Config`, the `MutableConfig` builder and TOML loading.

Typical flow:

```python
draft = MutableConfig.load_merged(extra_files=[Path("site.toml")])
config = draft.apply_args({"input": "data.csv", "outformat": "html"}).freeze()
```
"""

from __future__ import annotations

from goat.config.loaders import ConfigFileError
from goat.config.model import Config, MutableConfig

__all__ = ["Config", "ConfigFileError", "MutableConfig"]
