from typing import Any, TypeAlias


# Type aliases for Python dictionaries
HandlerEvent: TypeAlias = dict[str, Any]
HandlerContext: TypeAlias = Any
HandlerResponse: TypeAlias = dict[str, Any]
AppConfig: TypeAlias = dict[str, Any]
SerializedLink: TypeAlias = dict[str, Any]
