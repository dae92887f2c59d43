"""
Printer settings descriptor.

PrinterSettings describes what a printer can do (paper geometry, resolution,
custom commands, codepages and free-form options) so a printer manager can
decide how to route print, status and action calls before a job is sent.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from PrintAPI.exceptions import InvalidArgumentError
from PrintAPI.models.identity import IdentityProvider, SendableId, default_identity_provider
from PrintAPI.models.result import Err, Ok, Result


class PaperKind(str, Enum):
    """Physical media category a printer prints on."""
    RECEIPT = "RECEIPT"
    LABEL = "LABEL"
    CONTINUOUS = "CONTINUOUS"
    SHEET = "SHEET"


@dataclass(frozen=True)
class PrinterSettings:
    """
    Immutable description of a single printer.

    Only printer_id and paper_kind are required. Numeric fields are taken
    as given, including zero or negative values, and every collection may
    be absent (None). Sequences are stored as tuples and options as a
    read-only mapping over a private copy.
    """

    OPTION_DEFAULT = "default"

    printer_id: Optional[str] = None
    paper_width: int = 0  # millimeters
    printer_resolution: int = 0  # DPI
    paper_kind: Optional[PaperKind] = None
    can_handle_commands: bool = False
    commands: Optional[Tuple[str, ...]] = None
    does_report_status: bool = False
    codepages: Optional[Tuple[int, ...]] = None
    does_support_codepages: bool = False
    options: Optional[Mapping[str, str]] = field(default=None, hash=False)
    identity: Optional[SendableId] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.printer_id is None:
            raise InvalidArgumentError("printerId must not be null", field_name="printerId")
        if self.paper_kind is None:
            raise InvalidArgumentError("paperKind must not be null", field_name="paperKind")

        try:
            object.__setattr__(self, "paper_kind", PaperKind(self.paper_kind))
        except ValueError:
            raise InvalidArgumentError(
                f"paperKind {self.paper_kind!r} is not a known paper kind", field_name="paperKind"
            )

        if isinstance(self.commands, str):
            raise InvalidArgumentError("commands must be a sequence of strings, not a string", field_name="commands")

        if self.commands is not None:
            object.__setattr__(self, "commands", tuple(self.commands))
        if self.codepages is not None:
            object.__setattr__(self, "codepages", tuple(self.codepages))
        if self.options is not None:
            object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        if self.identity is None:
            object.__setattr__(self, "identity", default_identity_provider.new_identity())

    @classmethod
    def create(
        cls,
        printer_id: Optional[str],
        paper_width: int,
        printer_resolution: int,
        paper_kind: Optional[PaperKind],
        can_handle_commands: bool = False,
        commands: Optional[Sequence[str]] = None,
        does_report_status: bool = False,
        codepages: Optional[Sequence[int]] = None,
        does_support_codepages: bool = False,
        options: Optional[Mapping[str, str]] = None,
        identity_provider: Optional[IdentityProvider] = None,
    ) -> Result["PrinterSettings", InvalidArgumentError]:
        """
        Build a descriptor without raising.

        Args:
            identity_provider: Source of the descriptor's identity, the
                UUID provider when omitted.

        Returns:
            Ok(PrinterSettings) on success, Err(InvalidArgumentError) when
            printer_id or paper_kind is missing or invalid.
        """
        provider = identity_provider or default_identity_provider
        try:
            settings = cls(
                printer_id=printer_id,
                paper_width=paper_width,
                printer_resolution=printer_resolution,
                paper_kind=paper_kind,
                can_handle_commands=can_handle_commands,
                commands=commands,
                does_report_status=does_report_status,
                codepages=codepages,
                does_support_codepages=does_support_codepages,
                options=options,
                identity=provider.new_identity(),
            )
        except InvalidArgumentError as e:
            return Err(e)
        return Ok(settings)

    @property
    def id(self) -> str:
        """Unique instance id used by the messaging layer."""
        return self.identity.id

    def to_dict(self) -> Dict[str, Any]:
        """Return a mutable plain-Python copy of the settings."""
        return {
            "printer_id": self.printer_id,
            "paper_width": self.paper_width,
            "printer_resolution": self.printer_resolution,
            "paper_kind": self.paper_kind,
            "can_handle_commands": self.can_handle_commands,
            "commands": list(self.commands) if self.commands is not None else None,
            "does_report_status": self.does_report_status,
            "codepages": list(self.codepages) if self.codepages is not None else None,
            "does_support_codepages": self.does_support_codepages,
            "options": dict(self.options) if self.options is not None else None,
        }

    def to_json(self) -> str:
        from PrintAPI.schemas.printer_settings_schema import serialize

        return serialize(self)

    @classmethod
    def from_json(cls, json_data: str) -> "PrinterSettings":
        from PrintAPI.schemas.printer_settings_schema import deserialize

        return deserialize(json_data)
