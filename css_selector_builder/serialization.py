from typing import Any, Type, TypeVar, Union
import json
import logging

from pydantic import BaseModel, ValidationError as PydanticValidationError
from .exceptions import ParseError, SerializationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Rectangle(BaseModel):
    width: Union[int, float]
    height: Union[int, float]

    def __init__(self, width: Union[int, float], height: Union[int, float], **data: Any):
        super().__init__(width=width, height=height, **data)

    def get_area(self) -> Union[int, float]:
        return self.width * self.height


def _dump_model(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of ``obj``.

    Pydantic models are dumped through their own serializer, at any depth.

    Raises:
        SerializationError: If ``obj`` holds unserializable values or a circular reference
    """
    try:
        return json.dumps(obj, separators=(",", ":"), default=_dump_model)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Object could not be serialized to JSON: {str(e)}")


def from_json(model_cls: Type[ModelT], json_string: str) -> ModelT:
    """
    Build an instance of ``model_cls`` from its JSON representation.

    Args:
        model_cls: Pydantic model class to instantiate
        json_string: JSON text holding the model's fields

    Returns:
        Validated model instance

    Raises:
        ParseError: If the JSON is malformed or does not fit the model
    """
    try:
        return model_cls.model_validate_json(json_string)
    except PydanticValidationError as e:
        logger.debug(f"Rejected JSON for {model_cls.__name__}: {str(e)}")
        raise ParseError(f"Invalid JSON for {model_cls.__name__}: {str(e)}")
