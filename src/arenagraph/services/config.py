"""ConfigService — report the resolved settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arenagraph.services.result import ServiceResult

if TYPE_CHECKING:
    from arenagraph.config.settings import ArenaSettings


class ConfigService:
    def __init__(self, settings: ArenaSettings) -> None:
        self._settings = settings

    def show(self) -> ServiceResult:
        data = self._settings.model_dump(mode="json")
        source = data.pop("config_path")
        return ServiceResult(
            ok=True,
            op="config",
            data=data,
            meta={"source": source or "defaults"},
        )
