# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Conversion between SARIF models and their JSON wire form.

Usage::

    from sarifkit import decode_json, encode_json, SarifLog

    log = decode_json(SarifLog, text)
    print(log.runs[0].tool.driver.name)
    text = encode_json(log)

Every failure is raised as a :class:`~sarifkit.core.exceptions.DecodeError`
subclass naming the innermost offending wire key; nothing is recovered
locally and no partial object is returned.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from types import UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from sarifkit.core.config import get_settings
from sarifkit.core.constants import SARIF_VERSION
from sarifkit.core.exceptions import (
    DecodeError,
    MalformedValueError,
    MissingFieldError,
    UnrecognizedFieldError,
)
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.log import SarifLog
from sarifkit.models.run import SarifRun

logger = logging.getLogger("sarifkit.codec")

M = TypeVar("M", bound=SarifModel)


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def decode(model_cls: type[M], data: Any) -> M:
    """Validate a wire mapping into an instance of *model_cls*.

    Only wire names are accepted as keys, so ``SarifLog`` takes ``$schema``
    but rejects ``schema_``.
    """
    logger.debug("Decoding %s", model_cls.__name__)
    try:
        return model_cls.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _translate(exc, model_cls) from exc


def decode_json(model_cls: type[M], text: str | bytes) -> M:
    """Parse JSON *text* and decode it into an instance of *model_cls*.

    Duplicate object keys are not rejected; the last occurrence wins.
    """
    logger.debug("Decoding %s from JSON (length %d)", model_cls.__name__, len(text))
    try:
        return model_cls.model_validate_json(text, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _translate(exc, model_cls) from exc


def _translate(exc: ValidationError, model_cls: type[BaseModel]) -> DecodeError:
    """Map the first pydantic error onto the sarifkit error taxonomy."""
    error = exc.errors(include_url=False)[0]
    path = tuple(error["loc"])
    kind = error["type"]
    if kind == "extra_forbidden":
        field = str(path[-1])
    else:
        field = _declared_field(model_cls, path)

    err: DecodeError
    if kind == "missing":
        err = MissingFieldError(
            f'"{field}" is required but was not present', field=field, path=path
        )
    elif kind == "extra_forbidden":
        err = UnrecognizedFieldError(
            f'additional property not allowed: "{field}"', field=field, path=path
        )
    else:
        detail = error["msg"]
        where = f'"{field}"' if field else model_cls.__name__
        err = MalformedValueError(
            f"invalid value for {where}: {detail}", field=field, path=path, detail=detail
        )

    logger.debug(
        "Rejected %s at %s: %s", model_cls.__name__, err.pointer or "/", err
    )
    return err


def _declared_field(model_cls: type[BaseModel], path: tuple[str | int, ...]) -> str:
    """Return the innermost declared field on *path*, skipping list indexes and map keys."""
    field = ""
    current: Any = model_cls
    for part in path:
        current = _unwrap_optional(current)
        if isinstance(current, type) and issubclass(current, BaseModel):
            by_wire = {info.alias or name: info for name, info in current.model_fields.items()}
            info = by_wire.get(part) if isinstance(part, str) else None
            if info is None:
                break
            field = part
            current = info.annotation
        elif get_origin(current) is list:
            current = get_args(current)[0]
        elif get_origin(current) is dict:
            current = get_args(current)[1]
        else:
            break
    return field


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def encode(model: SarifModel, *, exclude_unset: bool = False) -> dict[str, Any]:
    """Return the wire mapping for *model*.

    Fields are emitted in declaration order with zero values included, absent
    nested objects as ``null``. With *exclude_unset* only
    fields that were explicitly set (or present in the decoded input) are
    emitted.

    Raises :class:`MissingFieldError` if any required field in the tree is
    unset or ``None``.
    """
    logger.debug("Encoding %s", type(model).__name__)
    _check_required(model, ())
    return model.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)


def encode_json(
    model: SarifModel,
    *,
    indent: int | None = None,
    exclude_unset: bool | None = None,
) -> str:
    """Encode *model* and serialize it to JSON text.

    *indent* and *exclude_unset* fall back to the ``SARIFKIT_JSON_INDENT`` and
    ``SARIFKIT_EXCLUDE_UNSET`` settings.
    """
    settings = get_settings()
    if indent is None:
        indent = settings.json_indent
    if exclude_unset is None:
        exclude_unset = settings.exclude_unset

    data = encode(model, exclude_unset=exclude_unset)
    return json.dumps(data, indent=indent if indent > 0 else None, ensure_ascii=False)


def _check_required(model: BaseModel, path: tuple[str | int, ...]) -> None:
    if isinstance(model, PropertyBag):
        return

    for name, info in type(model).model_fields.items():
        wire = info.alias or name
        value = getattr(model, name, None)
        if value is None:
            if info.is_required():
                raise MissingFieldError(
                    f"{wire} is a required field", field=wire, path=(*path, wire)
                )
            continue
        _check_value(value, (*path, wire))


def _check_value(value: Any, path: tuple[str | int, ...]) -> None:
    if isinstance(value, BaseModel):
        _check_required(value, path)
    elif isinstance(value, list):
        for i, item in enumerate(value):
            _check_value(item, (*path, i))
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_value(item, (*path, key))


# ---------------------------------------------------------------------------
# Document root shortcuts
# ---------------------------------------------------------------------------


def load_sarif(source: str | bytes | Mapping[str, Any]) -> SarifLog:
    """Decode a whole SARIF document from JSON text or an already-parsed mapping."""
    if isinstance(source, (str, bytes)):
        return decode_json(SarifLog, source)
    return decode(SarifLog, source)


def dump_sarif(log: SarifLog, **kwargs: Any) -> str:
    """Encode a whole SARIF document to JSON text; see :func:`encode_json`."""
    return encode_json(log, **kwargs)


def new_log(runs: Iterable[SarifRun] | None = None) -> SarifLog:
    """Create a document root carrying the configured schema URI and version 2.1.0."""
    return SarifLog(
        schema_=get_settings().schema_uri,
        version=SARIF_VERSION,
        runs=list(runs or []),
    )
