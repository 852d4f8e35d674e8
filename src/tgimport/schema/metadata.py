"""Attribute metadata decoded from provider schema JSON."""

from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class AttributeType(str, Enum):
    """Collapsed Terraform attribute type."""
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    LIST = "list"
    MAP = "map"
    SET = "set"
    OBJECT = "object"
    UNKNOWN = "unknown"


BASE_SCORE = 30.0
REQUIRED_BONUS = 15.0
COMPUTED_BONUS = 10.0
STRING_BONUS = 5.0
IDENTIFIER_DESCRIPTION_BONUS = 8.0
NAME_DESCRIPTION_BONUS = 5.0


def collapse_type(raw_type: Any) -> AttributeType:
    """
    Collapse a Terraform type expression to its head.
    
    "string" -> STRING, ["list", "string"] -> LIST, ["object", {...}] -> OBJECT.
    Anything unrecognised is UNKNOWN.
    """
    if isinstance(raw_type, list) and raw_type:
        raw_type = raw_type[0]
    if isinstance(raw_type, str):
        try:
            return AttributeType(raw_type)
        except ValueError:
            return AttributeType.UNKNOWN
    return AttributeType.UNKNOWN


class AttributeMetadata(BaseModel):
    """Metadata of a single resource attribute."""
    required: bool = False
    computed: bool = False
    optional: bool = False
    attr_type: AttributeType = Field(AttributeType.UNKNOWN, description="Head of the Terraform type expression")
    description: Optional[str] = None
    description_kind: Optional[str] = None
    sensitive: Optional[bool] = None

    @classmethod
    def from_schema_value(cls, value: Dict[str, Any]) -> "AttributeMetadata":
        """Build metadata from one entry of block.attributes; missing flags default to False."""
        if not isinstance(value, dict):
            return cls()
        description = value.get("description")
        description_kind = value.get("description_kind")
        sensitive = value.get("sensitive")
        return cls(
            required=value.get("required") is True,
            computed=value.get("computed") is True,
            optional=value.get("optional") is True,
            attr_type=collapse_type(value.get("type")),
            description=description if isinstance(description, str) else None,
            description_kind=description_kind if isinstance(description_kind, str) else None,
            sensitive=sensitive if isinstance(sensitive, bool) else None,
        )

    @property
    def is_string(self) -> bool:
        return self.attr_type == AttributeType.STRING

    def metadata_bonus(self) -> float:
        """Bonus points earned from flags, type and description."""
        bonus = 0.0
        if self.required:
            bonus += REQUIRED_BONUS
        if self.computed:
            bonus += COMPUTED_BONUS
        if self.is_string:
            bonus += STRING_BONUS
        if self.description:
            description = self.description.lower()
            if "identifier" in description or "unique" in description:
                bonus += IDENTIFIER_DESCRIPTION_BONUS
            if "name" in description or "id" in description:
                bonus += NAME_DESCRIPTION_BONUS
        return bonus

    def base_score(self) -> float:
        """Score of the attribute before any name pattern is considered."""
        return BASE_SCORE + self.metadata_bonus()

    def is_potential_id(self) -> bool:
        """A string attribute that is required or computed."""
        return self.is_string and (self.required or self.computed)


def parse_attributes(attributes: Any) -> Dict[str, AttributeMetadata]:
    """Decode a block.attributes object, keeping its order."""
    if not isinstance(attributes, dict):
        return {}
    return {name: AttributeMetadata.from_schema_value(value) for name, value in attributes.items()}
