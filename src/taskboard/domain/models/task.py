from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Task(BaseModel):
    id: int = Field(description="Server-assigned unique identifier.")
    title: str = Field(min_length=1, description="Task title.")
    description: str | None = Field(default=None, description="Optional free text.")
    is_completed: bool = Field(
        alias="isCompleted", description="Whether the task is done."
    )
    created_at: datetime = Field(alias="createdAt", description="Server creation time.")
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updatedAt", "updated_at"),
        serialization_alias="updatedAt",
        description="Server last-modification time.",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)
