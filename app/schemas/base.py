"""공통 Pydantic 베이스 스키마.

Shared Pydantic base schema.
Records are exchanged and persisted with camelCase keys (userId, createdAt, ...)
while Python code uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 별칭을 사용하는 베이스 모델.

    Base model whose fields are aliased to camelCase.
    Both the alias and the attribute name are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """camelCase JSON 호환 딕셔너리 (JSON-compatible dict keyed by camelCase)."""
        return self.model_dump(mode="json", by_alias=True)
