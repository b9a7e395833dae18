from typing import Any, TypeAlias


# Type aliases for Python dictionaries
LambdaEvent: TypeAlias = dict[str, Any]
LambdaContext: TypeAlias = Any
LambdaResponse: TypeAlias = dict[str, Any]
LinksMapping: TypeAlias = dict[str, str]
