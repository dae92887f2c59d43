# Unit test configuration - shared printer settings fixtures
# Every test runs with a clean codec configuration so environment variables
# from the developer's shell or a .env file cannot change encoded output.

import pytest

from PrintAPI.models.identity import SendableId
from PrintAPI.models.printer_settings_model import PaperKind, PrinterSettings
from PrintAPI.utils.config import INCLUDE_NULLS_ENV, JSON_INDENT_ENV, reset_codec_config


class CountingIdentityProvider:
    """Hands out predictable ids: test-id-1, test-id-2, ..."""

    def __init__(self, prefix: str = "test-id"):
        self.prefix = prefix
        self.issued = 0

    def new_identity(self) -> SendableId:
        self.issued += 1
        return SendableId(f"{self.prefix}-{self.issued}")


@pytest.fixture(autouse=True)
def clean_codec_config(monkeypatch):
    """Pin codec environment variables and drop the cached config."""
    monkeypatch.setenv(JSON_INDENT_ENV, "")
    monkeypatch.setenv(INCLUDE_NULLS_ENV, "false")
    reset_codec_config()
    yield
    reset_codec_config()


@pytest.fixture
def identity_provider():
    return CountingIdentityProvider()


@pytest.fixture
def receipt_settings():
    """58mm receipt printer with commands, codepages and options."""
    return PrinterSettings(
        printer_id="p1",
        paper_width=58,
        printer_resolution=203,
        paper_kind=PaperKind.RECEIPT,
        can_handle_commands=True,
        commands=["CUT", "FEED"],
        does_report_status=True,
        codepages=[437, 850],
        does_support_codepages=True,
        options={"density": "high"},
    )


@pytest.fixture
def bare_label_settings():
    """Label printer with only the required fields set."""
    return PrinterSettings(printer_id="label-1", paper_width=62, printer_resolution=300, paper_kind=PaperKind.LABEL)
