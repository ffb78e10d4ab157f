from todo_api.domain.models import Task, TaskStatus
from todo_api.domain.repositories import TaskStore

# -----------------------------
# Données d'exemple (tests manuels : Postman, curl...)
# -----------------------------
EXAMPLE_TASKS = [
    {"title": "Buy milk", "description": "Fat 3.2%", "status": TaskStatus.TODO},
    {"title": "Run API", "description": "Configure and start server", "status": TaskStatus.IN_PROGRESS},
    {"title": "Explore Postman", "description": "Check REST API", "status": TaskStatus.DONE},
]


def seed_example_tasks(store: TaskStore) -> list[Task]:
    return [store.create(**fields) for fields in EXAMPLE_TASKS]
