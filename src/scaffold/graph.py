# src/scaffold/graph.py
"""In-memory task graph.

Tasks are registered lazily and only realized when something looks them up.
Configuration callbacks go through a two-phase protocol: callbacks are
collected with ``on_finalized()`` during the registration phase, then
``finalize()`` runs each of them exactly once, in registration order.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Protocol

from .errors import ConfigurationError
from .logs import getAppLogger


TaskGuard = Callable[["Task"], bool]
TaskAction = Callable[["Task"], None]
FinalizeCallback = Callable[[], None]


def never_run(_task: "Task") -> bool:
    """Execution guard that always vetoes the task."""
    return False


@dataclass
class Task:
    name: str
    description: str = ""
    enabled: bool = True
    depends_on: list[str] = field(default_factory=list)
    guards: list[TaskGuard] = field(default_factory=list)
    actions: list[TaskAction] = field(default_factory=list)

    @property
    def will_execute(self) -> bool:
        return self.enabled and all(guard(self) for guard in self.guards)

    def disable(self) -> None:
        self.enabled = False

    def add_guard(self, guard: TaskGuard) -> None:
        if guard not in self.guards:
            self.guards.append(guard)

    def clear_dependencies(self) -> None:
        self.depends_on.clear()

    def set_description(self, description: str) -> None:
        self.description = description

    def run(self) -> bool:
        """Run the actions unless disabled or vetoed by a guard."""
        if not self.will_execute:
            return False
        for action in self.actions:
            action(self)
        return True


class TaskGraphProvider(Protocol):
    def find_by_name(self, name: str) -> Task | None: ...

    def on_finalized(self, callback: FinalizeCallback) -> None: ...


@dataclass
class _Registration:
    name: str
    factory: Callable[[], Task]


class TaskGraph:
    """Lazily realized collection of tasks for one module."""

    def __init__(self) -> None:
        self._registered: dict[str, _Registration] = {}
        self._realized: dict[str, Task] = {}
        self._callbacks: list[FinalizeCallback] = []
        self._finalized = False

    # --- registration ---------------------------------------------------------

    def register(
        self,
        name: str,
        *,
        depends_on: Iterable[str] = (),
        description: str = "",
        factory: Callable[[], Task] | None = None,
    ) -> None:
        if name in self._registered:
            xmsg = f"Task {name!r} is already registered"
            raise ConfigurationError(xmsg, value=name)

        deps = list(depends_on)

        def default_factory() -> Task:
            return Task(name=name, description=description, depends_on=list(deps))

        self._registered[name] = _Registration(name, factory or default_factory)

    def names(self) -> list[str]:
        """Registered task names, without realizing anything."""
        return list(self._registered)

    def __contains__(self, name: object) -> bool:
        return name in self._registered

    def __len__(self) -> int:
        return len(self._registered)

    # --- lookup ---------------------------------------------------------------

    def is_realized(self, name: str) -> bool:
        return name in self._realized

    def find_by_name(self, name: str) -> Task | None:
        task = self._realized.get(name)
        if task is not None:
            return task
        registration = self._registered.get(name)
        if registration is None:
            return None
        task = registration.factory()
        if task.name != name:
            xmsg = f"Factory for {name!r} produced a task named {task.name!r}"
            raise ConfigurationError(xmsg, value=task.name)
        self._realized[name] = task
        getAppLogger().trace(f"[graph] realized {name}")
        return task

    def get(self, name: str) -> Task:
        task = self.find_by_name(name)
        if task is None:
            xmsg = f"Unknown task {name!r}"
            raise ConfigurationError(xmsg, value=name)
        return task

    def realize_all(self) -> list[Task]:
        return [self.get(name) for name in self._registered]

    # --- finalize protocol ----------------------------------------------------

    @property
    def finalized(self) -> bool:
        return self._finalized

    def on_finalized(self, callback: FinalizeCallback) -> None:
        if self._finalized:
            xmsg = "Cannot register a finalize callback after the graph was finalized"
            raise ConfigurationError(xmsg, value=callback)
        self._callbacks.append(callback)

    def finalize(self) -> None:
        if self._finalized:
            return
        # flip first so callbacks cannot re-enter the finalize phase
        self._finalized = True
        logger = getAppLogger()
        logger.trace(f"[graph] finalizing with {len(self._callbacks)} callback(s)")
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    # --- execution planning ---------------------------------------------------

    def execution_plan(self, *targets: str) -> list[str]:
        """Names that would run for ``targets``, dependencies first.

        Disabled or guarded tasks are left out, but their remaining
        dependency edges are still followed. Unknown dependency names are
        soft-missed.
        """
        ordered: list[str] = []
        visited: set[str] = set()

        def visit(name: str, *, required: bool) -> None:
            if name in visited:
                return
            visited.add(name)
            task = self.find_by_name(name)
            if task is None:
                if required:
                    xmsg = f"Unknown task {name!r}"
                    raise ConfigurationError(xmsg, value=name)
                return
            for dep in task.depends_on:
                visit(dep, required=False)
            if task.will_execute:
                ordered.append(name)

        for target in targets:
            visit(target, required=True)
        return ordered
