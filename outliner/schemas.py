# outliner/schemas.py
import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import DEFAULT_LANGUAGE, LANGUAGES, MAX_SLIDES

DetailLevel = Literal["Brief", "Medium", "Detailed"]


class OutlineResponse(BaseModel):
    topic: str
    sections: List[str]


class SectionsRequest(BaseModel):
    sections: List[Optional[str]]
    language: str = DEFAULT_LANGUAGE


class ResizeRequest(SectionsRequest):
    slide_count: int = Field(ge=1, le=MAX_SLIDES)


class SectionsResponse(BaseModel):
    sections: List[str]


class PresentationPayload(BaseModel):
    """
    Body of the backend's create/update presentation call. Serialized with its
    aliases; outlineJSON carries the outline as a JSON-encoded list of strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    outline_json: str = Field(alias="outlineJSON")
    language: str
    template: str
    style: str
    detail_level: DetailLevel = Field(alias="detailLevel")
    slide_count: int = Field(alias="slideCount", ge=1)

    @field_validator("outline_json")
    @classmethod
    def validate_outline_json(cls, v: str) -> str:
        try:
            decoded = json.loads(v)
        except ValueError as e:
            raise ValueError(f"outlineJSON is not valid JSON: {e}") from e
        if not isinstance(decoded, list) or not all(isinstance(s, str) for s in decoded):
            raise ValueError("outlineJSON must encode a list of strings")
        return v

    @model_validator(mode="after")
    def check_slide_count(self) -> "PresentationPayload":
        if len(self.outline) != self.slide_count:
            raise ValueError(
                f"slideCount ({self.slide_count}) does not match outline length ({len(self.outline)})"
            )
        return self

    @property
    def outline(self) -> List[str]:
        return json.loads(self.outline_json)

    @classmethod
    def from_outline(
        cls,
        title: str,
        outline: List[str],
        language: str,
        template: str,
        style: str,
        detail_level: str,
    ) -> "PresentationPayload":
        names = {code: name for name, code in LANGUAGES.items()}
        return cls(
            title=title,
            outline_json=json.dumps(outline, ensure_ascii=False),
            language=names.get(language, language),
            template=template,
            style=style,
            detail_level=detail_level,
            slide_count=len(outline),
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
