from typing import Any, Dict
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for response records: snake_case in Python, camelCase on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
