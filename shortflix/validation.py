from pydantic import BaseModel, Field, HttpUrl, StrictStr, TypeAdapter, ValidationError, field_validator
from typing import Any, Dict, List, Optional

from .models import ShortCreate

_URL = TypeAdapter(HttpUrl)


class ShortPayload(BaseModel):
    """Strict view of a creation body. Field names match the JSON keys."""

    videoUrl: StrictStr = Field(..., min_length=1)
    title: StrictStr = Field(..., min_length=1)
    tags: List[StrictStr] = Field(..., min_length=1)

    @field_validator("videoUrl")
    @classmethod
    def check_url(cls, value: str) -> str:
        try:
            _URL.validate_python(value)
        except ValidationError:
            raise ValueError("must be a valid URL") from None
        return value

    @field_validator("tags")
    @classmethod
    def check_tags(cls, value: List[str]) -> List[str]:
        if any(not t for t in value):
            raise ValueError("each tag must be a non-empty string")
        return value


class ValidationResult(BaseModel):
    ok: bool
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    value: Optional[ShortCreate] = None


def _collect_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("body",)
        field = str(loc[0])
        msg = err.get("msg", "invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        errors.setdefault(field, []).append(msg)
    return errors


def validate_short_payload(data: Any) -> ValidationResult:
    """Check a raw creation body before it reaches the store."""
    if not isinstance(data, dict):
        return ValidationResult(ok=False, errors={"body": ["must be a JSON object"]})
    try:
        parsed = ShortPayload.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(ok=False, errors=_collect_errors(exc))
    value = ShortCreate(videoUrl=parsed.videoUrl, title=parsed.title, tags=list(parsed.tags))
    return ValidationResult(ok=True, value=value)
