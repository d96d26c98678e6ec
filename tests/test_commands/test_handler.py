"""Tests for command handling: organize, dark mode and user notices."""

import pytest

from variant_table.canvas.memory import MemoryCanvas
from variant_table.commands import CommandHandler, Host
from variant_table.config import Settings
from variant_table.document import Document
from variant_table.engine.config import LayoutConfig
from variant_table.engine.dark_walker import DARK_SUFFIX
from variant_table.engine.pipeline import Organizer
from variant_table.engine.table_builder import TABLE_SUFFIX
from variant_table.models.messages import CreateDarkModeMessage, OrganizeVariantsMessage
from tests.conftest import BUTTON_DOCUMENT


@pytest.fixture
def host(variables) -> Host:
    return Host(document=Document.from_dict(BUTTON_DOCUMENT), canvas=MemoryCanvas(), variables=variables)


@pytest.fixture
def handler(host) -> CommandHandler:
    return CommandHandler(host, settings=Settings())


class TestOrganize:
    def test_end_to_end(self, host, handler):
        notice = handler.handle({"type": "organize-variants"})
        assert notice == "Rendered 7 variants across 2 properties."
        assert host.notices == [notice]

        table = handler.last_table
        assert table.root.name == f"Button{TABLE_SUFFIX}"
        assert [c.column_value for c in table.cells[:4]] == ["default", "hover", "focus", "disabled"]
        assert [table.cells[0].row_value, table.cells[4].row_value] == ["lg", "sm"]
        assert table.instance_count == 7
        assert table.placeholder_count == 1
        # Placed to the right of the selected set (x=0, width=400)
        assert table.root.x == 500

    def test_from_instance_selection(self, host, handler):
        host.document.select("inst-1")
        assert handler.handle(OrganizeVariantsMessage()) == "Rendered 7 variants across 2 properties."

    def test_selection_errors_become_notices(self, host, handler):
        host.document.select("frame-1")
        assert handler.handle(OrganizeVariantsMessage()) == "Select a single Component, Instance, or Component Set."
        host.document.select("loose-1")
        assert handler.handle(OrganizeVariantsMessage()) == "Selected node is not part of a Component Set."
        host.document.select("empty-set")
        assert handler.handle(OrganizeVariantsMessage()) == "No variants found in the Component Set."
        assert handler.last_table is None
        assert host.canvas.top_level() == []
        assert len(host.notices) == 3

    def test_notice_callback(self, variables):
        seen = []
        host = Host(
            document=Document.from_dict(BUTTON_DOCUMENT),
            canvas=MemoryCanvas(),
            on_notice=seen.append,
        )
        CommandHandler(host).handle(OrganizeVariantsMessage())
        assert seen == ["Rendered 7 variants across 2 properties."]

    def test_font_family_from_settings(self, host):
        handler = CommandHandler(host, settings=Settings(font_family="Roboto"))
        handler.handle(OrganizeVariantsMessage())
        assert handler.last_table.root.children[0].font.family == "Roboto"

    def test_unknown_message_is_ignored(self, host, handler):
        assert handler.handle({"type": "noop"}) is None
        assert handler.handle({}) is None
        assert host.notices == []
        assert host.canvas.top_level() == []

    def test_injected_organizer_keeps_its_font(self, host):
        organizer = Organizer(config=LayoutConfig(font_family="Helvetica"))
        handler = CommandHandler(host, organizer=organizer, settings=Settings(font_family="Inter"))
        assert handler.organizer is organizer
        assert organizer.config.font_family == "Helvetica"
        handler.handle(OrganizeVariantsMessage())
        assert handler.last_table.root.children[0].font.family == "Helvetica"


class TestCreateDarkMode:
    def test_requires_table(self, host, handler):
        notice = handler.handle(CreateDarkModeMessage())
        assert notice == "No variants table found. Run Organize Variants first."
        assert handler.last_dark is None

    def test_default_names(self, host, handler):
        handler.handle(OrganizeVariantsMessage())
        notice = handler.handle({"type": "create-dark-mode"})
        report = handler.last_dark
        assert notice == f"Created dark mode table: {report.recolored} colors replaced."
        assert report.recolored > 0
        assert report.root.name == f"Button{TABLE_SUFFIX}{DARK_SUFFIX}"
        source = handler.last_table.root
        assert report.root.x == source.x + source.width + 100
        assert host.canvas.top_level() == [source, report.root]

    def test_missing_collection(self, handler):
        handler.handle(OrganizeVariantsMessage())
        notice = handler.handle(CreateDarkModeMessage(collection_name="Tokens"))
        assert notice == 'Collection "Tokens" not found. Available: General, Brand'
        assert handler.last_dark is None

    def test_missing_mode(self, handler):
        handler.handle(OrganizeVariantsMessage())
        notice = handler.handle({"type": "create-dark-mode", "darkModeName": "Night"})
        assert notice == 'Mode "Night" not found in collection "General". Available: VD, Dark'

    def test_settings_defaults(self, host):
        settings = Settings(default_collection_name="Brand", default_light_mode_name="Default")
        handler = CommandHandler(host, settings=settings)
        handler.handle(OrganizeVariantsMessage())
        notice = handler.handle(CreateDarkModeMessage())
        assert notice == 'Mode "Dark" not found in collection "Brand". Available: Default'

    def test_finds_table_by_name(self, host, handler):
        handler.handle(OrganizeVariantsMessage())
        table = handler.last_table.root
        fresh = CommandHandler(host, settings=Settings())
        notice = fresh.handle(CreateDarkModeMessage())
        assert notice.startswith("Created dark mode table:")
        assert fresh.last_dark.root.name == f"{table.name}{DARK_SUFFIX}"

    def test_latest_table_wins(self, host, handler):
        handler.handle(OrganizeVariantsMessage())
        host.document.select("inst-1")
        handler.handle(OrganizeVariantsMessage())
        second = handler.last_table.root
        handler.handle(CreateDarkModeMessage())
        assert handler.last_dark.root.x == second.x + second.width + 100
