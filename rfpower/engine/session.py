"""
Per-screen view-model shared by the browser page and the terminal app.

Holds the raw text of both fields, which one the user edited last, the
current explanation and the transient copy notice. Views forward edits here
and render whatever the returned update says.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..config import ConverterConfig, DEFAULT_CONFIG
from ..utils.constants import FIELD_DBM, FIELD_LABELS, FIELD_WATTS, FIELDS
from .conversion import Conversion, convert_dbm_to_watts, convert_watts_to_dbm

logger = logging.getLogger(__name__)

COPY_FAILED = "Copy failed"


@dataclass(frozen=True)
class DbmUpdate:
    """What changes on screen after the dBm field is edited."""
    watts_display: str
    explanation: str


@dataclass(frozen=True)
class WattsUpdate:
    """What changes on screen after the Watt field is edited."""
    dbm_display: str
    explanation: str


@dataclass(frozen=True)
class ClearUpdate:
    dbm_display: str = ""
    watts_display: str = ""
    explanation: str = ""


def _check_field(name: str) -> str:
    if name not in FIELDS:
        raise ValueError(f"Unknown field '{name}'. Available: {list(FIELDS)}")
    return name


@dataclass
class ConverterSession:
    """
    Two-way binding between the dBm and Watt fields.

    Editing a field never rewrites that field. The other field and the
    explanation are either recomputed from it (synced) or blanked (cleared).
    """
    config: ConverterConfig = DEFAULT_CONFIG
    dbm_text: str = ""
    watts_text: str = ""
    explanation: str = ""
    last_modified: Optional[str] = None
    copy_feedback: str = ""
    last_conversion: Optional[Conversion] = field(default=None, repr=False)

    # ─── Edits ───────────────────────────────────────────────────────────

    def on_dbm_edited(self, text: str) -> DbmUpdate:
        self.dbm_text = text
        self.last_modified = FIELD_DBM

        conversion = convert_dbm_to_watts(text, self.config)
        self.last_conversion = conversion
        self.watts_text = conversion.display
        self.explanation = conversion.explanation
        return DbmUpdate(watts_display=self.watts_text, explanation=self.explanation)

    def on_watts_edited(self, text: str) -> WattsUpdate:
        self.watts_text = text
        self.last_modified = FIELD_WATTS

        conversion = convert_watts_to_dbm(text, self.config)
        self.last_conversion = conversion
        self.dbm_text = conversion.display
        self.explanation = conversion.explanation
        return WattsUpdate(dbm_display=self.dbm_text, explanation=self.explanation)

    def on_edited(self, field_name: str, text: str):
        """Dispatch an edit by field name ("dbm" or "watts")."""
        if _check_field(field_name) == FIELD_DBM:
            return self.on_dbm_edited(text)
        return self.on_watts_edited(text)

    def on_clear(self) -> ClearUpdate:
        self.dbm_text = ""
        self.watts_text = ""
        self.explanation = ""
        self.last_modified = None
        self.last_conversion = None
        return ClearUpdate()

    # ─── Derived view state ──────────────────────────────────────────────

    @property
    def synced(self) -> bool:
        return self.last_conversion is not None and not self.last_conversion.cleared

    @property
    def show_clear(self) -> bool:
        """Whether "Clear All" is offered; only while a field holds text."""
        return bool(self.dbm_text or self.watts_text)

    @property
    def derivation(self):
        if self.last_conversion is None:
            return None
        return self.last_conversion.derivation

    @property
    def operating_point(self) -> Optional[tuple[float, float]]:
        if self.last_conversion is None:
            return None
        return self.last_conversion.operating_point

    def text_of(self, field_name: str) -> str:
        if _check_field(field_name) == FIELD_DBM:
            return self.dbm_text
        return self.watts_text

    def can_copy(self, field_name: str) -> bool:
        return bool(self.text_of(field_name))

    # ─── Clipboard ───────────────────────────────────────────────────────

    def copy(self, field_name: str, writer: Callable[[str], None]) -> str:
        """
        Hand the current text of a field to a clipboard writer.

        Returns the notice to show; it is also kept in ``copy_feedback``
        until ``dismiss_feedback`` is called. Conversion state is untouched.
        """
        value = self.text_of(field_name)
        try:
            writer(value)
        except Exception as e:
            logger.warning("Copying %s value failed: %s", field_name, e)
            self.copy_feedback = COPY_FAILED
        else:
            self.copy_feedback = f"{FIELD_LABELS[field_name]} value copied!"
        return self.copy_feedback

    def dismiss_feedback(self) -> None:
        self.copy_feedback = ""
