"""Encounters repository with enemy reference validation."""
from __future__ import annotations

from typing import Dict

from epic_adventure.data.errors import DataReferenceError, DataValidationError
from epic_adventure.data.repositories.base import RepositoryBase
from epic_adventure.data.repositories.enemies_repo import EnemiesRepository
from epic_adventure.domain.defs import EncounterDef

_KINDS = ("combat", "rescue")


class EncountersRepository(RepositoryBase[EncounterDef]):
    """Loads encounters and ensures combat encounters name a real enemy."""

    def __init__(self, enemies_repo: EnemiesRepository | None = None, base_path=None) -> None:
        super().__init__("encounters.json", base_path)
        self._enemies_repo = enemies_repo or EnemiesRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EncounterDef]:
        enemy_ids = set(self._enemies_repo.ids())

        encounters: Dict[str, EncounterDef] = {}
        for raw_id, payload in raw.items():
            context = f"encounter '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {
                    "kind",
                    "label",
                    "order",
                    "crossroad_description",
                    "intro_text",
                    "victory_text",
                    "defeat_text",
                },
                context,
                optional_fields={
                    "enemy_id",
                    "defeat_followup_prompt",
                    "defeat_followup_text",
                    "unlock_name",
                },
            )

            kind = self._require_str(data["kind"], f"{context} kind")
            if kind not in _KINDS:
                raise DataValidationError(f"{context} kind must be one of {list(_KINDS)}.")

            enemy_id = self._require_optional_str(data.get("enemy_id"), f"{context} enemy_id")
            if kind == "combat":
                if enemy_id is None:
                    raise DataValidationError(f"{context} is a combat encounter without an enemy_id.")
                if enemy_id not in enemy_ids:
                    raise DataReferenceError(f"{context} references missing enemy '{enemy_id}'.")

            encounters[raw_id] = EncounterDef(
                id=raw_id,
                kind=kind,  # type: ignore[arg-type]
                label=self._require_str(data["label"], f"{context} label"),
                crossroad_description=self._require_str(
                    data["crossroad_description"], f"{context} crossroad_description"
                ),
                intro_text=self._require_str(data["intro_text"], f"{context} intro_text"),
                victory_text=self._require_str(data["victory_text"], f"{context} victory_text"),
                defeat_text=self._require_str(data["defeat_text"], f"{context} defeat_text"),
                order=self._require_int(data["order"], f"{context} order"),
                enemy_id=enemy_id,
                defeat_followup_prompt=self._require_optional_str(
                    data.get("defeat_followup_prompt"), f"{context} defeat_followup_prompt"
                ),
                defeat_followup_text=self._require_optional_str(
                    data.get("defeat_followup_text"), f"{context} defeat_followup_text"
                ),
                unlock_name=self._require_optional_str(data.get("unlock_name"), f"{context} unlock_name"),
            )
        return encounters

    def for_player(self, player_name: str) -> list[EncounterDef]:
        """Return the encounters available to ``player_name`` in crossroad order."""
        available = [encounter for encounter in self.all() if encounter.is_unlocked_for(player_name)]
        available.sort(key=lambda encounter: (encounter.order, encounter.id))
        return available
