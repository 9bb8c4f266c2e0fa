"""Generic higher-order functions over sequences.

Filter, map, reduce, find-index, all-match and integer ranges, curried so
they compose into pipelines:

```python
from sequtils import create_pipeline, filter_by_predicate, map_each

evens_doubled = create_pipeline(
    filter_by_predicate(lambda n: n % 2 == 0),
    map_each(lambda n: n * 2),
)
evens_doubled([1, 2, 3, 4])  # [4, 8]
```

Logging is disabled for the ``sequtils`` namespace until the application
calls ``sequtils.config.setup_loguru_logger``.
"""

from loguru import logger

from .domain import (
    NOT_FOUND,
    Transform,
    create_pipeline,
    every,
    filter_by_predicate,
    find_index,
    int_range,
    map_each,
    reduce_left,
)

logger.disable("sequtils")

__version__ = "0.1.0"

__all__ = [
    "NOT_FOUND",
    "Transform",
    "__version__",
    "create_pipeline",
    "every",
    "filter_by_predicate",
    "find_index",
    "int_range",
    "map_each",
    "reduce_left",
]
