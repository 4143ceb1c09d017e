"""Blog member models"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Permission levels a blog member can hold."""
    ADMIN = "admin"
    EDITOR = "editor"
    CONTRIBUTOR = "contributor"


class BlogMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    role: str


class MembersResponse(BaseModel):
    """Body of GET /members"""
    members: Optional[List[BlogMember]] = Field(default_factory=list)

    @field_validator("members", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # "members": null means no members
        return [] if value is None else value
