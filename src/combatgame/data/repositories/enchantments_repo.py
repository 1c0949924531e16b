"""Enchantments repository."""
from __future__ import annotations

from typing import Dict

from combatgame.data.errors import DataValidationError
from combatgame.data.repositories.base import RepositoryBase
from combatgame.domain.defs import EnchantmentDef

# Numeric fields each enchantment kind requires.
_KIND_FIELDS = {
    "flat": {"amount"},
    "random": {"min_amount", "max_amount"},
    "multiplier": {"factor"},
}


class EnchantmentsRepository(RepositoryBase[EnchantmentDef]):
    """Loads and validates weapon enchantment definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enchantments.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnchantmentDef]:
        enchantments: Dict[str, EnchantmentDef] = {}
        for raw_id, data in self._iter_payloads(raw, "enchantment"):
            context = f"enchantment '{raw_id}'"
            kind = self._require_str(data.get("kind"), f"{context} kind")
            if kind not in _KIND_FIELDS:
                raise DataValidationError(f"{context} kind must be one of {sorted(_KIND_FIELDS)}.")
            self._assert_exact_fields(data, {"name", "cost", "kind"} | _KIND_FIELDS[kind], context)

            name = self._require_str(data["name"], f"{context} name")
            cost = self._require_int(data["cost"], f"{context} cost", minimum=0)
            if kind == "flat":
                definition = EnchantmentDef(
                    id=raw_id,
                    name=name,
                    cost=cost,
                    kind="flat",
                    amount=self._require_int(data["amount"], f"{context} amount"),
                )
            elif kind == "random":
                min_amount = self._require_int(data["min_amount"], f"{context} min_amount", minimum=0)
                max_amount = self._require_int(data["max_amount"], f"{context} max_amount", minimum=0)
                self._require_range(min_amount, max_amount, f"{context} amount")
                definition = EnchantmentDef(
                    id=raw_id,
                    name=name,
                    cost=cost,
                    kind="random",
                    min_amount=min_amount,
                    max_amount=max_amount,
                )
            else:
                factor = self._require_number(data["factor"], f"{context} factor")
                if factor < 0:
                    raise DataValidationError(f"{context} factor cannot be negative.")
                definition = EnchantmentDef(id=raw_id, name=name, cost=cost, kind="multiplier", factor=factor)
            enchantments[raw_id] = definition
        return enchantments
