from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredModel(BaseModel):
    """Base for records persisted in the key-value store.

    Stored documents use camelCase keys (``enrolledCourses``, ``studentId``);
    Python code uses the snake_case attribute names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)
