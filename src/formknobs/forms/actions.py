"""Helpers for validating submitted form data.

Form handlers extract the raw field values, safe-parse them and either
continue with the parsed data or show the first issue's message:

```python
outcome = validate_form(upsert_subject_schema, request.form, default_error="Invalid subject payload")
if not outcome.ok:
    return {"error": outcome.error}
save_subject(outcome.data)
```
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping

from formknobs.validation import ObjectSchema, Schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormOutcome:
    """Parsed form data, or the message to show the user."""

    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _raw_value(form: Mapping[str, Any], name: str) -> Any:
    value = form.get(name)
    # parse_qs style mappings hold a list of values per key
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value


def form_values(form: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, str | None]:
    """Extract the named fields as strings, None when a field is missing.

    Args:
        form: Submitted form data (dict, MultiDict or parse_qs output)
        fields: Field names to extract

    Returns:
        Dictionary of field name to string value or None
    """
    values: Dict[str, str | None] = {}
    for name in fields:
        value = _raw_value(form, name)
        values[name] = None if value is None else str(value)
    return values


def validate_form(
    schema: Schema[Any],
    form: Mapping[str, Any],
    fields: Iterable[str] | None = None,
    json_fields: Iterable[str] = (),
    default_error: str = "Invalid payload",
    json_error: str = "Invalid order payload",
) -> FormOutcome:
    """Validate submitted form data against a schema.

    Args:
        schema: Schema to safe-parse the extracted values with
        form: Submitted form data
        fields: Field names to extract. Defaults to the fields of an
            object schema.
        json_fields: Fields holding JSON text (e.g. an ordered id list)
            that are decoded before validation. A missing field decodes
            to an empty list.
        default_error: Message used if the failure carries no message
        json_error: Message returned when a JSON field cannot be decoded

    Returns:
        FormOutcome with the parsed data or the headline error message
    """
    if fields is None:
        if not isinstance(schema, ObjectSchema):
            raise TypeError("fields must be given for schemas other than object schemas")
        fields = schema.shape.keys()

    values: Dict[str, Any] = dict(form_values(form, fields))
    for name in json_fields:
        raw = values.get(name)
        try:
            values[name] = json.loads(raw if raw is not None else "[]")
        except json.JSONDecodeError:
            logger.debug(f"Rejected form: field '{name}' is not valid JSON")
            return FormOutcome(error=json_error)

    result = schema.safe_parse(values)
    if not result.success:
        message = result.issues[0].message if result.issues else ""
        logger.debug(f"Rejected form: {message or default_error}")
        return FormOutcome(error=message or default_error)
    return FormOutcome(data=result.data)
