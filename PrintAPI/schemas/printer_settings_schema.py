"""
Printer Settings Wire Schema

JSON codec for PrinterSettings. The payload is a flat JSON object keyed by
the camelCase field names (printerId, paperWidth, paperKind, ...) plus the
identity "id". Unknown keys are ignored so newer senders can add fields
without breaking older readers.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from PrintAPI.exceptions import MalformedPayloadError
from PrintAPI.models.identity import IdentityProvider, SendableId, default_identity_provider
from PrintAPI.models.printer_settings_model import PaperKind, PrinterSettings
from PrintAPI.utils.config import CodecConfig, get_codec_config

logger = logging.getLogger(__name__)

_json_array = TypeAdapter(List[Any])


class PrinterSettingsSchema(BaseModel):
    """Wire representation of a single printer's settings"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    printer_id: StrictStr = Field(..., alias="printerId", description="Unique id of the printer")
    paper_width: StrictInt = Field(0, alias="paperWidth", description="Paper width in millimeters")
    printer_resolution: StrictInt = Field(0, alias="printerResolution", description="Resolution in DPI")
    paper_kind: PaperKind = Field(..., alias="paperKind", description="Symbolic paper kind, e.g. RECEIPT")
    commands: Optional[List[StrictStr]] = Field(None, description="Custom commands the printer accepts")
    codepages: Optional[List[StrictInt]] = Field(None, description="Supported codepage ids")
    options: Optional[Dict[str, StrictStr]] = Field(None, description="Printer specific key/value settings")
    can_handle_commands: StrictBool = Field(False, alias="canHandleCommands")
    does_report_status: StrictBool = Field(False, alias="doesReportStatus")
    does_support_codepages: StrictBool = Field(False, alias="doesSupportCodepages")
    id: Optional[StrictStr] = Field(None, description="Identity of the sent instance")

    @classmethod
    def from_settings(cls, settings: PrinterSettings) -> "PrinterSettingsSchema":
        data = settings.to_dict()
        data["id"] = settings.id
        return cls(**data)

    def to_settings(self, identity_provider: Optional[IdentityProvider] = None) -> PrinterSettings:
        if self.id is not None:
            identity = SendableId(self.id)
        else:
            identity = (identity_provider or default_identity_provider).new_identity()

        return PrinterSettings(
            printer_id=self.printer_id,
            paper_width=self.paper_width,
            printer_resolution=self.printer_resolution,
            paper_kind=self.paper_kind,
            can_handle_commands=self.can_handle_commands,
            commands=self.commands,
            does_report_status=self.does_report_status,
            codepages=self.codepages,
            does_support_codepages=self.does_support_codepages,
            options=self.options,
            identity=identity,
        )


def _error_fields(error: ValidationError) -> List[str]:
    """Collect the top-level payload keys named by a pydantic error."""
    fields = []
    for detail in error.errors():
        loc = detail.get("loc") or ()
        if loc and isinstance(loc[0], str) and loc[0] not in fields:
            fields.append(loc[0])
    return fields


def _dump(schema: PrinterSettingsSchema, config: CodecConfig) -> Dict[str, Any]:
    return schema.model_dump(mode="json", by_alias=True, exclude_none=not config.include_nulls)


def serialize(settings: PrinterSettings, config: Optional[CodecConfig] = None) -> str:
    """
    Encode printer settings as a JSON object.

    Args:
        settings: Settings to encode
        config: Codec configuration, read from the environment when omitted

    Returns:
        JSON text
    """
    config = config or get_codec_config()
    schema = PrinterSettingsSchema.from_settings(settings)
    payload = schema.model_dump_json(by_alias=True, exclude_none=not config.include_nulls, indent=config.json_indent)
    logger.debug(f"Serialized settings for printer {settings.printer_id}")
    return payload


def deserialize(json_data: str, identity_provider: Optional[IdentityProvider] = None) -> PrinterSettings:
    """
    Decode printer settings from a JSON object.

    Args:
        json_data: JSON text produced by serialize() or a compatible sender
        identity_provider: Used only when the payload carries no "id"

    Returns:
        PrinterSettings

    Raises:
        MalformedPayloadError: If the text is not JSON, is not an object,
            lacks printerId or paperKind, names an unknown paper kind or
            has members of the wrong type
    """
    try:
        schema = PrinterSettingsSchema.model_validate_json(json_data)
    except ValidationError as e:
        fields = _error_fields(e)
        logger.warning(f"Rejected printer settings payload: {e.error_count()} error(s) in {fields or 'payload'}")
        raise MalformedPayloadError(f"Invalid printer settings payload: {e}", fields=fields) from e

    settings = schema.to_settings(identity_provider)
    logger.debug(f"Deserialized settings for printer {settings.printer_id}")
    return settings


def serialize_list(items: Iterable[PrinterSettings], config: Optional[CodecConfig] = None) -> str:
    """Encode several printers' settings as a JSON array."""
    config = config or get_codec_config()
    payload = [_dump(PrinterSettingsSchema.from_settings(settings), config) for settings in items]
    return _json_array.dump_json(payload, indent=config.json_indent).decode("utf-8")


def deserialize_list(json_data: str, identity_provider: Optional[IdentityProvider] = None) -> List[PrinterSettings]:
    """
    Decode a JSON array of printer settings.

    Raises:
        MalformedPayloadError: If the text is not a JSON array or any element
            is not a valid settings object; the error's index names the element
    """
    try:
        elements = _json_array.validate_json(json_data)
    except ValidationError as e:
        logger.warning("Rejected printer settings list: not a JSON array")
        raise MalformedPayloadError(f"Invalid printer settings list: {e}") from e

    result = []
    for index, element in enumerate(elements):
        try:
            schema = PrinterSettingsSchema.model_validate(element)
        except ValidationError as e:
            fields = _error_fields(e)
            logger.warning(f"Rejected printer settings list element {index}: {fields or 'payload'}")
            raise MalformedPayloadError(
                f"Invalid printer settings at index {index}: {e}", fields=fields, index=index
            ) from e
        result.append(schema.to_settings(identity_provider))

    logger.debug(f"Deserialized settings for {len(result)} printer(s)")
    return result
