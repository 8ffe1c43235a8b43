from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Article(BaseModel):
    """A news article as handed over by the article fetcher."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: Optional[str] = None
    # The news API ships both "date" and "dateTime"; either is accepted
    date: Optional[str] = Field(
        None, validation_alias=AliasChoices("date", "dateTime")
    )
    url: Optional[str] = None

    @field_validator("title", "date", "url", mode="before")
    @classmethod
    def drop_non_string(cls, value: Any) -> Optional[str]:
        # A malformed field must not reject the whole article
        return value if isinstance(value, str) else None
