import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.models.task import Task
from app.models.user import User
from app.schemas.task import TaskCreate, TaskFilter, TaskStatusUpdate, TaskUpdate
from app.services.errors import ConflictError, InternalError, NotFoundError


def _like_pattern(term: str) -> str:
    """Substring pattern with LIKE wildcards in the term matched literally"""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class TaskService:
    """
    CRUD over the tasks owned by one user.

    Every query is filtered by the caller's id, so a task belonging to
    another user behaves exactly like a missing one.
    """

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def _owned(self, user: User):
        return self.db.query(Task).filter(Task.user_id == user.id)

    def create(self, task: TaskCreate, user: User) -> Task:
        if task.task_code and self.task_code_exists(task.task_code, user):
            raise ConflictError(f"Task code {task.task_code} already exists")

        db_task = Task(**task.model_dump(), user_id=user.id)
        try:
            self.db.add(db_task)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if task.task_code:
                # Lost the race against a concurrent create with the same code
                self.logger.warning("Task create rejected for user %s: %s", user.id, e.orig)
                raise ConflictError(f"Task code {task.task_code} already exists")
            self.logger.exception("Could not create task for user %s", user.id)
            raise InternalError()
        except SQLAlchemyError:
            self.db.rollback()
            self.logger.exception("Could not create task for user %s", user.id)
            raise InternalError()

        self.db.refresh(db_task)
        self.logger.info("Task %s created by user %s", db_task.id, user.id)
        return db_task

    def list(self, filters: TaskFilter, user: User) -> List[Task]:
        query = self._owned(user)

        if filters.status:
            query = query.filter(Task.status == filters.status)

        if filters.search:
            pattern = _like_pattern(filters.search)
            query = query.filter(
                or_(
                    Task.title.ilike(pattern, escape="\\"),
                    Task.description.ilike(pattern, escape="\\"),
                )
            )

        return query.order_by(Task.created_at).all()

    def get(self, task_id: str, user: User) -> Task:
        task = self._owned(user).filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError("Task")
        return task

    def update(self, task_id: str, task_update: TaskUpdate, user: User) -> Task:
        task = self.get(task_id, user)

        update_data = task_update.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(task, key, value)

        try:
            # The version column guards against lost updates
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            self.logger.warning("Concurrent update of task %s detected", task_id)
            raise ConflictError("Task was modified concurrently")
        except SQLAlchemyError:
            self.db.rollback()
            self.logger.exception("Could not update task %s", task_id)
            raise InternalError()

        self.db.refresh(task)
        self.logger.info("Task %s updated with fields %s", task.id, sorted(update_data))
        return task

    def update_status(self, task_id: str, status_update: TaskStatusUpdate, user: User) -> Task:
        return self.update(task_id, TaskUpdate(status=status_update.status), user)

    def remove(self, task_id: str, user: User) -> None:
        try:
            affected = (
                self._owned(user)
                .filter(Task.id == task_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            self.logger.exception("Could not delete task %s", task_id)
            raise InternalError()

        if affected == 0:
            raise NotFoundError("Task")
        self.logger.info("Task %s deleted by user %s", task_id, user.id)

    def task_code_exists(self, task_code: str, user: User) -> bool:
        return (
            self._owned(user)
            .filter(Task.task_code == task_code.upper())
            .first()
            is not None
        )
