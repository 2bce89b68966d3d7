# app/models/contributors.py

from datetime import datetime
from typing import Any, List, Optional

from pydantic import (
    AnyUrl,
    BaseModel,
    Field,
    RootModel,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.networks import validate_email

_URL = TypeAdapter(AnyUrl)


class CompanyOut(BaseModel):
    name: str
    catchPhrase: Optional[str] = None
    bs: Optional[str] = None

    @field_validator("catchPhrase", "bs", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ContributorOut(BaseModel):
    """
    A validated upstream user. Values are returned exactly as received;
    validators only accept or reject.
    """

    id: int = Field(strict=True, gt=0)
    name: str = Field(min_length=1)
    email: str
    username: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[datetime] = None
    website: Optional[str] = None
    company: Optional[CompanyOut] = None

    @field_validator("username", "phone", "date", "website", "company", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        _, normalized = validate_email(value)
        # display-name forms like "Jo <jo@x.org>" normalize to something else
        if normalized.lower() != value.lower():
            raise ValueError("must be a bare email address")
        return value

    @field_validator("website")
    @classmethod
    def check_website(cls, value: str) -> str:
        # upstream sends bare host names like "hildegard.org"
        candidate = value if "://" in value else f"http://{value}"
        try:
            _URL.validate_python(candidate)
        except ValidationError:
            raise ValueError("must be a valid URL")
        return value


class ContributorList(RootModel[List[ContributorOut]]):
    @model_validator(mode="after")
    def check_unique_ids(self) -> "ContributorList":
        seen = set()
        for contributor in self.root:
            if contributor.id in seen:
                raise ValueError(f"duplicate contributor id {contributor.id}")
            seen.add(contributor.id)
        return self


class ErrorOut(BaseModel):
    error: str


def parse_contributors(payload: Any) -> List[ContributorOut]:
    """
    Validate a decoded JSON value as an ordered list of contributors.

    The whole batch is rejected (pydantic.ValidationError) if any element
    fails the schema or two elements share an id.
    """
    return ContributorList.model_validate(payload).root
