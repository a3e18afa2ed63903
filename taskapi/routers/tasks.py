# taskapi/routers/tasks.py
"""
Task CRUD. These routes are open: no session cookie is required.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from taskapi.config import Settings
from taskapi.deps import get_settings, get_task_store
from taskapi.services.tasks import TaskStore

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    payload: Dict[str, Any] = Body(...),
    store: TaskStore = Depends(get_task_store),
):
    task_id = store.create(payload)
    return {"acknowledged": True, "insertedId": task_id}


@router.get("")
def list_tasks(store: TaskStore = Depends(get_task_store)):
    return [t.to_doc() for t in store.list()]


@router.get("/{task_id}")
def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    return store.get_by_id(task_id).to_doc()


# PUT /tasks/{id} - edits, reordering or moving between columns
@router.put("/{task_id}")
def update_task(
    task_id: str,
    payload: Dict[str, Any] = Body(...),
    store: TaskStore = Depends(get_task_store),
    settings: Settings = Depends(get_settings),
):
    result = store.replace(task_id, payload, policy=settings.TASK_UPDATE_POLICY)
    message = "Task created" if result.upserted_id else "Task updated successfully"
    return {"message": message, **result.to_doc()}


@router.delete("/{task_id}")
def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    deleted = store.delete(task_id)
    return {"message": "Task deleted successfully", "deletedCount": deleted}
