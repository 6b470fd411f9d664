# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sarifkit - typed SARIF 2.1.0 object model with strict JSON conversion."""

__version__ = "0.1.0"

from sarifkit.codec import (
    decode,
    decode_json,
    dump_sarif,
    encode,
    encode_json,
    load_sarif,
    new_log,
)
from sarifkit.core.exceptions import (
    DecodeError,
    MalformedValueError,
    MissingFieldError,
    SarifError,
    UnrecognizedFieldError,
)
from sarifkit.models import (
    PropertyBag,
    SarifLocation,
    SarifLog,
    SarifMessage,
    SarifResult,
    SarifRun,
    SarifTool,
    SarifToolComponent,
)

__all__ = [
    "DecodeError",
    "MalformedValueError",
    "MissingFieldError",
    "PropertyBag",
    "SarifError",
    "SarifLocation",
    "SarifLog",
    "SarifMessage",
    "SarifResult",
    "SarifRun",
    "SarifTool",
    "SarifToolComponent",
    "UnrecognizedFieldError",
    "__version__",
    "decode",
    "decode_json",
    "dump_sarif",
    "encode",
    "encode_json",
    "load_sarif",
    "new_log",
]
