"""Project domain model."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .base import RecordModel


class ProjectMember(BaseModel):
    """A member of a project, also used as a task assignee."""

    id: str
    name: str


# Assignees share the member record shape
Assignee = ProjectMember


class Project(RecordModel):
    """A project owning members and a denormalized list of task ids."""

    id: str
    name: str = Field(..., min_length=1)
    description: str | None = None
    created_at: datetime
    deadline: datetime | None = None
    manager_id: str
    members: list[ProjectMember] = Field(default_factory=list)
    tasks: list[str] = Field(default_factory=list)
    updated_at: datetime | None = None

    @field_validator("members")
    @classmethod
    def unique_members(cls, v: list[ProjectMember]) -> list[ProjectMember]:
        """Keep the first member for each id."""
        seen: set[str] = set()
        unique: list[ProjectMember] = []
        for member in v:
            if member.id in seen:
                continue
            seen.add(member.id)
            unique.append(member)
        return unique

    @property
    def member_ids(self) -> list[str]:
        return [m.id for m in self.members]

    def find_member(self, member_id: str) -> ProjectMember | None:
        """Get a member by id."""
        for member in self.members:
            if member.id == member_id:
                return member
        return None
