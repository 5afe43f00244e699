# === FILE: site_distill/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера SiteDistill.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from site_distill.utils import normalize_url

DEFAULT_TITLE = "Crawled Website Content"


class CrawlConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(..., description="Стартовый URL обхода.")
    path_scoped: bool = Field(False, description="Ограничить обход префиксом пути стартового URL.")
    strip_media: bool = Field(True, description="Строгая очистка: удалять медиа, формы, link/meta.")
    ignore_www: Optional[bool] = Field(
        None, description="Сравнивать хосты без ведущего www. (по умолчанию = path_scoped)."
    )
    concurrency: int = Field(4, ge=1, description="Число параллельных воркеров.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("SiteDistillBot/1.0", min_length=1, description="Заголовок User-Agent.")
    max_pages: Optional[int] = Field(None, ge=1, description="Необязательный лимит по числу страниц.")
    title: str = Field(DEFAULT_TITLE, min_length=1, description="Заголовок итогового документа.")

    @field_validator("seed_url", mode="before")
    def _normalize_seed(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        # InvalidURL is a ValueError, pydantic reports it as ValidationError
        url = normalize_url(v)
        if not url.lower().startswith(("http://", "https://")):
            raise ValueError(f"seed URL must use http or https: {v!r}")
        return url


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


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Читает YAML или JSON файл конфигурации и возвращает словарь."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlConfig:
    """
    Собирает CrawlConfig из файла (если указан) и явных переопределений.
    Переопределения со значением None игнорируются, так что опции CLI,
    не заданные пользователем, не затирают значения из файла.
    """
    data: Dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlConfig(**data)


__all__ = ["CrawlConfig", "DEFAULT_TITLE", "load_config", "read_config_file"]
