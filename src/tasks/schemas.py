from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskTag(str, Enum):
    DEV = "dev"
    DEVOPS = "devops"
    QUALITY = "quality"
    MONITOR = "monitor"
    DESIGN = "design"
    OTHER = "other"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Task(CamelModel):
    id: str
    title: str
    # Updates store tags unchecked, so this is not narrowed to TaskTag.
    tag: str
    status: TaskStatus
    priority: TaskPriority
    created_at: datetime
    updated_at: datetime | None = None


class TaskStats(CamelModel):
    total: int
    todo: int
    in_progress: int
    done: int


class TaskList(CamelModel):
    count: int
    stats: TaskStats
    tasks: list[Task]
