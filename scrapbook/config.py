# === FILE: scrapbook/config.py ===
"""
Модуль для загрузки и валидации конфигурации Scrapbook.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ValidationError,
    field_validator,
)

from scrapbook.utils import extract_domain

DEFAULT_DEPTH = 2
MIN_DEPTH = 1
MAX_DEPTH = 10
MAX_CONCURRENT = 5


class CrawlConfig(BaseModel):
    """Конфигурация одного сеанса обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    origin_url: HttpUrl = Field(..., description="Стартовая страница обхода.")
    max_depth: int = Field(DEFAULT_DEPTH, description="Глубина обхода ссылок, 1..10.")
    concurrency: int = Field(MAX_CONCURRENT, ge=1, description="Число воркеров загрузки/извлечения.")
    discovery_concurrency: int = Field(
        MAX_CONCURRENT, ge=1, description="Число воркеров на этапе поиска ссылок."
    )
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("ScrapbookBot/1.0", min_length=1, description="Заголовок User-Agent.")
    retry_times: int = Field(0, ge=0, description="Резерв повторных попыток, по умолчанию выключен.")

    @field_validator("origin_url", mode="before")
    def _strip_fragment(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.split("#", 1)[0]
        return v

    @field_validator("max_depth", mode="before")
    def _clamp_depth(cls, v: Any) -> int:
        # пусто, не число или вне диапазона -> глубина по умолчанию
        if isinstance(v, bool):
            return DEFAULT_DEPTH
        try:
            depth = int(v)
        except (TypeError, ValueError):
            return DEFAULT_DEPTH
        if depth < MIN_DEPTH or depth > MAX_DEPTH:
            return DEFAULT_DEPTH
        return depth

    @property
    def domain(self) -> str:
        """Имя хоста стартовой страницы; по нему фильтруются ссылки."""
        return extract_domain(str(self.origin_url))


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlConfig(**data)


def with_overrides(config: CrawlConfig | None, **values: Any) -> CrawlConfig:
    """
    Возвращает новый CrawlConfig с переопределёнными полями (None пропускается).
    Модель неизменяема, поэтому значения проходят валидацию заново.
    """
    data: dict[str, Any] = config.model_dump() if config is not None else {}
    data.update({k: v for k, v in values.items() if v is not None})
    return CrawlConfig(**data)


__all__ = [
    "CrawlConfig",
    "ValidationError",
    "load_config",
    "with_overrides",
    "DEFAULT_DEPTH",
    "MAX_DEPTH",
    "MAX_CONCURRENT",
]
