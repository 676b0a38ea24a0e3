"""Handle-addressed storage for the player and the enemies of one session."""
from __future__ import annotations

from typing import Iterator, List, NewType, Tuple

from ashcore.domain.entities import EnemyEntity, PlayerEntity

EntityHandle = NewType("EntityHandle", int)


class EntityRegistry:
    """Enemies keep their handle for the whole session; dead ones stay until unregistered."""

    def __init__(self) -> None:
        self._player: PlayerEntity | None = None
        self._enemies: List[EnemyEntity | None] = []

    @property
    def player(self) -> PlayerEntity:
        if self._player is None:
            raise LookupError("No player has been registered.")
        return self._player

    @property
    def has_player(self) -> bool:
        return self._player is not None

    def set_player(self, player: PlayerEntity) -> None:
        if self._player is not None and self._player is not player:
            raise ValueError("A player is already registered for this session.")
        self._player = player

    def register_enemy(self, enemy: EnemyEntity) -> EntityHandle:
        for index, existing in enumerate(self._enemies):
            if existing is enemy:
                return EntityHandle(index)
        self._enemies.append(enemy)
        return EntityHandle(len(self._enemies) - 1)

    def unregister_enemy(self, handle: EntityHandle) -> bool:
        if not 0 <= handle < len(self._enemies) or self._enemies[handle] is None:
            return False
        self._enemies[handle] = None
        return True

    def get(self, handle: EntityHandle) -> EnemyEntity | None:
        if 0 <= handle < len(self._enemies):
            return self._enemies[handle]
        return None

    def handle_of(self, enemy: EnemyEntity) -> EntityHandle | None:
        for index, existing in enumerate(self._enemies):
            if existing is enemy:
                return EntityHandle(index)
        return None

    def iter_enemies(self, include_dead: bool = False) -> Iterator[Tuple[EntityHandle, EnemyEntity]]:
        """Yield ``(handle, enemy)`` in registration order."""
        for index, enemy in enumerate(self._enemies):
            if enemy is None:
                continue
            if enemy.is_dead and not include_dead:
                continue
            yield EntityHandle(index), enemy

    def alive_enemies(self) -> List[EnemyEntity]:
        return [enemy for _, enemy in self.iter_enemies()]

    def find_enemy_at(self, x: int, y: int) -> EnemyEntity | None:
        """Return the living enemy standing on ``(x, y)``."""
        for _, enemy in self.iter_enemies():
            if enemy.x == x and enemy.y == y:
                return enemy
        return None
