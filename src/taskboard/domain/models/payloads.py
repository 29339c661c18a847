from pydantic import BaseModel, ConfigDict, Field


class CompletionPatch(BaseModel):
    """Body of the partial update that flips a task's completion flag."""

    is_completed: bool = Field(alias="isCompleted")

    model_config = ConfigDict(populate_by_name=True)


class TaskCreatePayload(BaseModel):
    title: str = Field(min_length=1, description="Title of the new task.")
    description: str | None = Field(default=None, description="Optional free text.")
