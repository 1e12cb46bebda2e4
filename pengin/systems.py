"""Systems and the registry that runs them in dependency order."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Type


class BaseSystem:
    """A system run once per frame.

    The default hooks only count how often they were run; subclasses
    override the hooks they need.
    """

    updates: int = 0
    fixed_updates: int = 0
    renders: int = 0

    def update(self) -> None:
        self.updates += 1

    def fixed_update(self) -> None:
        self.fixed_updates += 1

    def render(self) -> None:
        self.renders += 1


class SystemRegistry:
    """Holds systems in registration order; dependencies run before dependants."""

    def __init__(self) -> None:
        self._systems: List[BaseSystem] = []
        self._dependencies: List[List[BaseSystem]] = []
        self._index_of: Dict[int, int] = {}

    def register(
        self, system: BaseSystem, dependencies: Iterable[BaseSystem] = ()
    ) -> int:
        """Add a system and return its index."""
        self._systems.append(system)
        self._dependencies.append(list(dependencies))
        index = len(self._systems) - 1
        self._index_of[id(system)] = index
        return index

    def get(self, index: int) -> BaseSystem:
        if not 0 <= index < len(self._systems):
            raise IndexError("system index out of bounds")
        return self._systems[index]

    def update(self) -> None:
        self._run(lambda system: system.update())

    def fixed_update(self) -> None:
        self._run(lambda system: system.fixed_update())

    def render(self) -> None:
        self._run(lambda system: system.render())

    def _run(self, step: Callable[[BaseSystem], None]) -> None:
        done: Set[int] = set()
        for index in range(len(self._systems)):
            self._run_one(index, step, done)

    def _run_one(
        self, index: int, step: Callable[[BaseSystem], None], done: Set[int]
    ) -> None:
        system = self._systems[index]
        if id(system) in done:
            return
        for dependency in self._dependencies[index]:
            try:
                dep_index = self._index_of[id(dependency)]
            except KeyError:
                raise KeyError("dependency system was never registered") from None
            self._run_one(dep_index, step, done)
        step(system)
        done.add(id(system))


class SystemManager:
    """Registers at most one system per system type."""

    def __init__(self) -> None:
        self._registry = SystemRegistry()
        self._index_of_type: Dict[type, int] = {}

    def register_system(
        self,
        system_type: Type[BaseSystem],
        system: BaseSystem,
        dependencies: Sequence[BaseSystem] = (),
    ) -> BaseSystem:
        """Register ``system`` under ``system_type``; if one is already there, return it."""
        if not (isinstance(system_type, type) and issubclass(system_type, BaseSystem)):
            raise TypeError("system type must derive from BaseSystem")
        existing: Optional[int] = self._index_of_type.get(system_type)
        if existing is not None:
            return self._registry.get(existing)
        self._index_of_type[system_type] = self._registry.register(system, dependencies)
        return system

    def get_system(self, system_type: Type[BaseSystem]) -> BaseSystem:
        try:
            return self._registry.get(self._index_of_type[system_type])
        except KeyError:
            raise KeyError(f"{system_type.__name__} is not registered") from None

    def is_registered(self, system_type: Type[BaseSystem]) -> bool:
        return system_type in self._index_of_type

    def update(self) -> None:
        self._registry.update()

    def fixed_update(self) -> None:
        self._registry.fixed_update()

    def render(self) -> None:
        self._registry.render()