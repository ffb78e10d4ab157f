import threading

from todo_api.domain import models
from todo_api.domain.models import TaskStatus
from todo_api.domain.repositories import TaskStore


# ============================================================
# CREATE / READ
# ============================================================

def test_create_assigns_increasing_ids(store: TaskStore):
    ids = [store.create(title=f"Task {i}").id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_create_stamps_and_defaults(store: TaskStore):
    task = store.create(title="Buy milk")
    assert task.description == ""
    assert task.status is TaskStatus.TODO
    assert task.created_at
    assert task.created_at == task.updated_at


def test_get_unknown_id_is_absent(store: TaskStore):
    store.create(title="A")
    assert store.get(0) is None
    assert store.get(42) is None


def test_get_returns_copy(store: TaskStore):
    created = store.create(title="A")
    created.title = "changed outside the store"
    assert store.get(created.id).title == "A"


def test_list_is_sorted_by_id(store: TaskStore):
    for title in ("c", "a", "b"):
        store.create(title=title)
    store.delete(2)
    store.create(title="d")
    assert [t.id for t in store.list()] == [1, 3, 4]


def test_list_empty(store: TaskStore):
    assert store.list() == []
    assert store.count() == 0


# ============================================================
# UPDATE / PATCH
# ============================================================

def test_update_replaces_fields(store: TaskStore, monkeypatch):
    task = store.create(title="Old", description="d", status=TaskStatus.TODO)
    monkeypatch.setattr(models, "now_timestamp", lambda: "2099-01-01 00:00:00")

    assert store.update(task.id, title="New", description="", status=TaskStatus.DONE) is True

    updated = store.get(task.id)
    assert (updated.title, updated.description, updated.status) == ("New", "", TaskStatus.DONE)
    assert updated.created_at == task.created_at
    assert updated.updated_at == "2099-01-01 00:00:00"


def test_update_missing_is_noop(store: TaskStore):
    store.create(title="A")
    assert store.update(99, title="B", description="", status=TaskStatus.TODO) is False
    assert store.count() == 1


def test_patch_only_touches_given_fields(store: TaskStore):
    task = store.create(title="Buy milk", description="Fat 3.2%")
    assert store.patch(task.id, {"status": TaskStatus.DONE}) is True

    patched = store.get(task.id)
    assert patched.title == "Buy milk"
    assert patched.description == "Fat 3.2%"
    assert patched.status == TaskStatus.DONE
    assert patched.updated_at >= patched.created_at


def test_patch_ignores_unknown_keys(store: TaskStore):
    task = store.create(title="A")
    assert store.patch(task.id, {"id": 99, "created_at": "never"}) is True
    patched = store.get(task.id)
    assert patched.id == task.id
    assert patched.created_at == task.created_at


def test_patch_empty_still_stamps(store: TaskStore, monkeypatch):
    task = store.create(title="A")
    monkeypatch.setattr(models, "now_timestamp", lambda: "2099-01-01 00:00:00")
    assert store.patch(task.id, {}) is True
    assert store.get(task.id).updated_at == "2099-01-01 00:00:00"


def test_patch_missing_is_noop(store: TaskStore):
    assert store.patch(1, {"title": "x"}) is False
    assert store.count() == 0


def test_status_transitions_are_free(store: TaskStore):
    task = store.create(title="A", status=TaskStatus.DONE)
    assert store.patch(task.id, {"status": TaskStatus.TODO})
    assert store.get(task.id).status == TaskStatus.TODO


# ============================================================
# DELETE / COUNT
# ============================================================

def test_delete(store: TaskStore):
    task = store.create(title="A")
    assert store.delete(task.id) is True
    assert store.get(task.id) is None
    assert store.delete(task.id) is False
    assert store.count() == 0


def test_ids_never_reused_after_delete(store: TaskStore):
    first = store.create(title="A")
    second = store.create(title="B")
    store.delete(first.id)
    store.delete(second.id)
    assert store.create(title="C").id == 3


# ============================================================
# CONCURRENCE
# ============================================================

def test_concurrent_creates_get_unique_ids(store: TaskStore):
    per_thread, n_threads = 50, 8
    results: list[int] = []
    results_lock = threading.Lock()

    def worker(n: int) -> None:
        ids = [store.create(title=f"t{n}-{i}").id for i in range(per_thread)]
        with results_lock:
            results.extend(ids)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = per_thread * n_threads
    assert sorted(results) == list(range(1, total + 1))
    assert store.count() == total
    assert [t.id for t in store.list()] == list(range(1, total + 1))


def test_concurrent_mixed_operations_keep_count_consistent(store: TaskStore):
    for i in range(100):
        store.create(title=f"t{i}")

    def deleter(start: int) -> None:
        for task_id in range(start, 101, 2):
            store.delete(task_id)

    def patcher() -> None:
        for task_id in range(1, 101):
            store.patch(task_id, {"status": TaskStatus.DONE})

    threads = [
        threading.Thread(target=deleter, args=(1,)),
        threading.Thread(target=patcher),
        threading.Thread(target=deleter, args=(1,)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    remaining = store.list()
    assert store.count() == len(remaining) == 50
    assert all(t.id % 2 == 0 for t in remaining)
