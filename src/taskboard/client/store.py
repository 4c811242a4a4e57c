"""Client state container.

State is split into three slices (auth, projects, tasks). It only changes
through ``Store.dispatch``, which runs every slice reducer on the action.
Reducers are pure: they return a new slice and never mutate the old one.

Async operations dispatch ``<op>/pending``, then ``<op>/fulfilled`` with the
server's object or ``<op>/rejected`` with the server's message.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

JSON = dict[str, Any]


@dataclass(frozen=True)
class Action:
    type: str
    payload: Any = None


def pending(op: str) -> Action:
    return Action(f"{op}/pending")


def fulfilled(op: str, payload: Any = None) -> Action:
    return Action(f"{op}/fulfilled", payload)


def rejected(op: str, message: str) -> Action:
    return Action(f"{op}/rejected", message)


# Operation names
REGISTER = "auth/register"
LOGIN = "auth/login"
LOAD_PROFILE = "auth/profile"
RESTORE_SESSION = "auth/restore"
LOGOUT = "auth/logout"
FETCH_PROJECTS = "projects/fetchAll"
CREATE_PROJECT = "projects/create"
GET_PROJECT = "projects/getById"
UPDATE_PROJECT = "projects/update"
DELETE_PROJECT = "projects/delete"
CLEAR_PROJECT_ERROR = "projects/clearError"
FETCH_TASKS = "tasks/fetchAll"
CREATE_TASK = "tasks/create"
UPDATE_TASK = "tasks/update"
DELETE_TASK = "tasks/delete"
CLEAR_TASK_ERROR = "tasks/clearError"


@dataclass(frozen=True)
class AuthState:
    user: JSON | None = None
    token: str | None = None
    is_authenticated: bool = False
    loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ProjectsState:
    projects: list[JSON] = field(default_factory=list)
    current_project: JSON | None = None
    loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class TasksState:
    tasks: list[JSON] = field(default_factory=list)
    loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class AppState:
    auth: AuthState = field(default_factory=AuthState)
    projects: ProjectsState = field(default_factory=ProjectsState)
    tasks: TasksState = field(default_factory=TasksState)


def _split(action: Action) -> tuple[str, str]:
    op, _, phase = action.type.rpartition("/")
    return op, phase


def _replace_by_id(items: list[JSON], item: JSON) -> list[JSON]:
    return [item if existing.get("id") == item.get("id") else existing for existing in items]


def _merge_project(existing: JSON, updated: JSON) -> JSON:
    # Update responses carry task ids; keep the already resolved task objects
    return {**existing, **{k: v for k, v in updated.items() if k != "tasks"}}


def auth_reducer(state: AuthState, action: Action) -> AuthState:
    if action.type == LOGOUT:
        return AuthState()
    if action.type == RESTORE_SESSION:
        token, user = action.payload
        return replace(state, token=token, user=user, is_authenticated=True)

    op, phase = _split(action)
    if op not in (REGISTER, LOGIN, LOAD_PROFILE):
        return state

    if phase == "pending":
        return replace(state, loading=True, error=None)
    if phase == "rejected":
        return replace(state, loading=False, error=action.payload)
    if phase == "fulfilled":
        if op == LOAD_PROFILE:
            return replace(state, loading=False, user=action.payload)
        user = {k: v for k, v in action.payload.items() if k != "token"}
        return replace(
            state,
            loading=False,
            user=user,
            token=action.payload["token"],
            is_authenticated=True,
        )
    return state


def projects_reducer(state: ProjectsState, action: Action) -> ProjectsState:
    if action.type == LOGOUT:
        return ProjectsState()
    if action.type == CLEAR_PROJECT_ERROR:
        return replace(state, error=None)

    op, phase = _split(action)
    if not op.startswith("projects/"):
        return state

    if phase == "pending":
        return replace(state, loading=True, error=None)
    if phase == "rejected":
        return replace(state, loading=False, error=action.payload)
    if phase != "fulfilled":
        return state

    payload = action.payload
    if op == FETCH_PROJECTS:
        return replace(state, loading=False, projects=list(payload))
    if op == CREATE_PROJECT:
        return replace(state, loading=False, projects=[payload, *state.projects])
    if op == GET_PROJECT:
        return replace(state, loading=False, current_project=payload)
    if op == UPDATE_PROJECT:
        projects = [
            _merge_project(p, payload) if p.get("id") == payload.get("id") else p
            for p in state.projects
        ]
        current = state.current_project
        if current is not None and current.get("id") == payload.get("id"):
            current = _merge_project(current, payload)
        return replace(state, loading=False, projects=projects, current_project=current)
    if op == DELETE_PROJECT:
        current = state.current_project
        if current is not None and current.get("id") == payload:
            current = None
        return replace(
            state,
            loading=False,
            projects=[p for p in state.projects if p.get("id") != payload],
            current_project=current,
        )
    return state


def tasks_reducer(state: TasksState, action: Action) -> TasksState:
    if action.type == LOGOUT:
        return TasksState()
    if action.type == CLEAR_TASK_ERROR:
        return replace(state, error=None)
    if action.type == fulfilled(DELETE_PROJECT).type:
        return replace(state, tasks=[t for t in state.tasks if t.get("projectId") != action.payload])

    op, phase = _split(action)
    if not op.startswith("tasks/"):
        return state

    if phase == "pending":
        return replace(state, loading=True, error=None)
    if phase == "rejected":
        return replace(state, loading=False, error=action.payload)
    if phase != "fulfilled":
        return state

    payload = action.payload
    if op == FETCH_TASKS:
        return replace(state, loading=False, tasks=list(payload))
    if op == CREATE_TASK:
        return replace(state, loading=False, tasks=[payload, *state.tasks])
    if op == UPDATE_TASK:
        return replace(state, loading=False, tasks=_replace_by_id(state.tasks, payload))
    if op == DELETE_TASK:
        return replace(state, loading=False, tasks=[t for t in state.tasks if t.get("id") != payload])
    return state


def root_reducer(state: AppState, action: Action) -> AppState:
    return AppState(
        auth=auth_reducer(state.auth, action),
        projects=projects_reducer(state.projects, action),
        tasks=tasks_reducer(state.tasks, action),
    )


Listener = Callable[[AppState, Action], None]


class Store:
    """Holds the current ``AppState`` and notifies listeners on each dispatch."""

    def __init__(self, state: AppState | None = None):
        self._state = state or AppState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        self._state = root_reducer(self._state, action)
        for listener in list(self._listeners):
            listener(self._state, action)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
