"""
Field specifications for SDOC IR.

A field is one member declared inside a definition body:

    @required int* count : "how many" = 0;
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

REQUIRED_TAG = "required"


class FieldSpec(BaseModel):
    """
    One member of a definition body.

    Attributes:
        type: Composed type expression (e.g. "int*", "Vec<u8>")
        name: Field identifier, empty when the source omits it
        description: Free-form description
        default_value: Default value text, empty for no default
        annotation_tags: Tags attached with a leading '@', in source order
    """

    type: str = ""
    name: str = ""
    description: str = ""
    default_value: str = ""
    annotation_tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def required(self) -> bool:
        """True iff the field carries the literal 'required' tag."""
        return REQUIRED_TAG in self.annotation_tags

    @property
    def has_default(self) -> bool:
        return bool(self.default_value)
