# Structural (de)serialization of diagnostics: a field-for-field JSON mirror of the models.

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from codespan_reporting.config import Config, get_default_config
from codespan_reporting.diagnostic.models import Diagnostic

logger = logging.getLogger(__name__)

_DIAGNOSTIC_LIST: TypeAdapter[List[Diagnostic]] = TypeAdapter(List[Diagnostic])


def diagnostic_to_dict(diagnostic: Diagnostic, config: Optional[Config] = None) -> Dict[str, Any]:
    """
    Return the JSON-compatible dict for a diagnostic.

    Shape: {severity, code, message, labels: [{style, file_id,
    range: {start, end}, message}], notes: [...]}. "code" is left out when it
    is None and config.omit_missing_code is set.
    """
    if config is None:
        config = get_default_config()

    data = diagnostic.model_dump(mode="json")
    if config.omit_missing_code and data["code"] is None:
        del data["code"]
    return data


def diagnostic_from_dict(data: Dict[str, Any]) -> Diagnostic:
    """
    Build a Diagnostic from the dict produced by diagnostic_to_dict().

    Raises:
        pydantic.ValidationError: if data does not have the expected shape.
    """
    try:
        diagnostic = Diagnostic.model_validate(data)
    except ValidationError as e:
        logger.debug("Rejected diagnostic data: %d error(s)", e.error_count())
        raise
    return diagnostic


def dump_diagnostic(diagnostic: Diagnostic, config: Optional[Config] = None) -> str:
    """Serialize one diagnostic to a JSON string."""
    if config is None:
        config = get_default_config()

    exclude = {"code"} if config.omit_missing_code and diagnostic.code is None else None
    text = diagnostic.model_dump_json(indent=config.indent, exclude=exclude)
    logger.debug(
        "Serialized %s diagnostic: %d label(s), %d note(s), %d chars",
        diagnostic.severity.value,
        len(diagnostic.labels),
        len(diagnostic.notes),
        len(text),
    )
    return text


def load_diagnostic(text: str) -> Diagnostic:
    """
    Parse one diagnostic from JSON.

    Raises:
        pydantic.ValidationError: on malformed JSON or an unexpected shape.
    """
    try:
        diagnostic = Diagnostic.model_validate_json(text)
    except ValidationError as e:
        logger.debug("Failed to load diagnostic from %d chars: %s", len(text), e)
        raise
    logger.debug(
        "Loaded %s diagnostic: %d label(s), %d note(s)",
        diagnostic.severity.value,
        len(diagnostic.labels),
        len(diagnostic.notes),
    )
    return diagnostic


def dump_diagnostics(diagnostics: Sequence[Diagnostic], config: Optional[Config] = None) -> str:
    """Serialize a sequence of diagnostics to a JSON array, in the given order."""
    if config is None:
        config = get_default_config()

    payload = [diagnostic_to_dict(d, config) for d in diagnostics]
    logger.debug("Serializing %d diagnostic(s)", len(payload))
    return json.dumps(payload, indent=config.indent)


def load_diagnostics(text: str) -> List[Diagnostic]:
    """
    Parse a JSON array of diagnostics.

    Raises:
        pydantic.ValidationError: on malformed JSON or if any element is invalid.
    """
    try:
        diagnostics = _DIAGNOSTIC_LIST.validate_json(text)
    except ValidationError as e:
        logger.debug("Failed to load diagnostics: %d error(s)", e.error_count())
        raise
    logger.debug("Loaded %d diagnostic(s)", len(diagnostics))
    return diagnostics
