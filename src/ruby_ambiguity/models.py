from pydantic import BaseModel, ConfigDict, Field, model_validator


class SourceSpan(BaseModel):
    """Half-open byte range ``[begin, end)`` into a source buffer."""

    model_config = ConfigDict(frozen=True)

    begin: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "SourceSpan":
        if self.begin > self.end:
            raise ValueError(f"span begin {self.begin} is past its end {self.end}")
        return self

    def size(self) -> int:
        return self.end - self.begin


class SourceLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    ends_with_eof: bool

    @property
    def line_end(self) -> int:
        """Offset of the end of the line, excluding the newline."""
        if self.ends_with_eof:
            return self.end
        return self.end - 1


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True)

    span: SourceSpan
    message: str
