from typing import Any, TypeAlias

AnyDict: TypeAlias = dict[str, Any]
