import enum
import uuid
from datetime import datetime
from sqlalchemy import (
    Boolean, Column, Date, DateTime, Enum, Float, ForeignKey, Integer, String, Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from app.database import Base

class TaskStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    DONE = "done"

class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class TaskCategory(str, enum.Enum):
    DEVELOPMENT = "Development"
    DESIGN = "Design"
    TESTING = "Testing"
    DOCUMENTATION = "Documentation"
    BUG_FIX = "Bug Fix"
    FEATURE = "Feature"
    RESEARCH = "Research"
    MEETING = "Meeting"

class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        # Task codes are unique per owner, not globally
        UniqueConstraint("user_id", "task_code", name="uq_tasks_user_task_code"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    status = Column(
        Enum(TaskStatus, values_callable=lambda e: [m.value for m in e]),
        default=TaskStatus.OPEN,
        nullable=False,
    )

    # Owner, set from the authenticated user only
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Extended attributes
    task_code = Column(String(32), nullable=True)
    priority = Column(
        Enum(TaskPriority, values_callable=lambda e: [m.value for m in e]),
        default=TaskPriority.MEDIUM,
        nullable=True,
    )
    category = Column(
        Enum(TaskCategory, values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    assigned_to = Column(String, nullable=True)
    estimated_hours = Column(Float, nullable=True)
    deadline = Column(Date, nullable=True)
    tags = Column(String(255), nullable=True)
    notify_on_completion = Column(Boolean, default=False, nullable=False)

    # System columns
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    version = Column(Integer, nullable=False)

    owner = relationship("User", back_populates="tasks")

    __mapper_args__ = {"version_id_col": version}
