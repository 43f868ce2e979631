from pydantic import BaseModel, ConfigDict

from recurrente.utils.conversion import camel_key


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys when (de)serialized.

    Payloads reach these models after ``to_camel_case`` and leave them
    through ``model_dump(by_alias=True)`` before ``to_snake_case``.
    """

    model_config = ConfigDict(alias_generator=camel_key, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class MessageResponse(BaseModel):
    message: str
