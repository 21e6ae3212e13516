"""
Database Seeding Script
Creates the tables and populates them with demo users and tasks
"""

import logging
import sys

from app.database import SessionLocal
from app.models.task import TaskCategory, TaskPriority, TaskStatus
from app.schemas.task import TaskCreate
from app.schemas.user import UserCreate, UserLogin
from app.services.auth_service import AuthService
from app.services.errors import ConflictError, ServiceError
from app.services.task_service import TaskService
from create_tables import create_tables

logger = logging.getLogger("seed_all")

DEMO_PASSWORD = "Password123"

DEMO_USERS = [
    {"full_name": "Alice Martin", "email": "alice@example.com"},
    {"full_name": "Bob Stone", "email": "bob@example.com"},
]

DEMO_TASKS = {
    "alice@example.com": [
        {
            "task_code": "TASK-001",
            "title": "Buy milk",
            "description": "",
            "status": TaskStatus.OPEN,
        },
        {
            "task_code": "TASK-002",
            "title": "Write release notes",
            "description": "Summarise the changes for version 1.0",
            "status": TaskStatus.IN_PROGRESS,
            "priority": TaskPriority.HIGH,
            "category": TaskCategory.DOCUMENTATION,
            "estimated_hours": 3,
            "tags": "docs, release",
        },
        {
            "task_code": "BUG-17",
            "title": "Fix login redirect",
            "description": "Users land on a blank page after sign in",
            "status": TaskStatus.DONE,
            "priority": TaskPriority.CRITICAL,
            "category": TaskCategory.BUG_FIX,
            "assigned_to": "bob@example.com",
            "notify_on_completion": True,
        },
    ],
    "bob@example.com": [
        {
            "task_code": "TASK-001",
            "title": "Plan sprint review",
            "description": "Book the room and collect demos",
            "priority": TaskPriority.MEDIUM,
            "category": TaskCategory.MEETING,
        },
    ],
}

def seed_demo_users(auth_service: AuthService) -> int:
    created = 0
    for user in DEMO_USERS:
        try:
            auth_service.register(UserCreate(password=DEMO_PASSWORD, **user))
            created += 1
        except ConflictError:
            logger.info("User %s already exists, skipping", user["email"])
    return created

def seed_demo_tasks(auth_service: AuthService, task_service: TaskService) -> int:
    created = 0
    for email, tasks in DEMO_TASKS.items():
        owner = auth_service.find_by_email(email)
        for task in tasks:
            try:
                task_service.create(TaskCreate(**task), owner)
                created += 1
            except ConflictError:
                logger.info("Task %s for %s already exists, skipping", task["task_code"], email)
    return created

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    create_tables()

    db = SessionLocal()
    try:
        auth_service = AuthService(db)
        task_service = TaskService(db)

        users = seed_demo_users(auth_service)
        tasks = seed_demo_tasks(auth_service, task_service)

        # Sanity check that the demo credentials work
        auth_service.authenticate(UserLogin(email=DEMO_USERS[0]["email"], password=DEMO_PASSWORD))
    except ServiceError as e:
        logger.error("Seeding failed: %s", e.message)
        sys.exit(1)
    finally:
        db.close()

    logger.info("Seeded %d users and %d tasks", users, tasks)
    logger.info("Login with any demo user and password %s", DEMO_PASSWORD)

if __name__ == "__main__":
    main()
