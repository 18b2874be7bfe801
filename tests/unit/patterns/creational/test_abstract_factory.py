"""Tests for the abstract widget factories."""
import pytest

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.patterns.creational.abstract_factory import (
    Application,
    LinuxUIFactory,
    MacUIFactory,
    WindowsUIFactory,
    get_factory,
)
from pattern_catalogue.patterns.creational.abstract_factory.dialog import (
    Dialog,
    GUIFactory,
    MacFactory,
    WindowsFactory,
)


class TestFactorySelection:
    """Test choosing a factory by operating system."""

    @pytest.mark.parametrize(
        "os_name,factory_class",
        [("Windows", WindowsUIFactory), ("macOS", MacUIFactory), ("Linux", LinuxUIFactory)],
    )
    def test_known_operating_systems(self, os_name, factory_class):
        """Test each supported OS maps to its factory."""
        factory = get_factory(os_name)
        assert isinstance(factory, factory_class)
        assert factory.theme() == os_name

    def test_unknown_operating_system(self):
        """Test an unsupported OS is rejected."""
        with pytest.raises(UnknownTypeError, match="Unsupported OS: BeOS"):
            get_factory("BeOS")


class TestApplication:
    """Test the client only ever sees one widget family."""

    @pytest.mark.parametrize("os_name", ["Windows", "macOS", "Linux"])
    def test_widgets_share_family(self, os_name):
        """Test every widget created comes from the same family."""
        app = Application(get_factory(os_name))
        app.create_ui()
        families = app.families()
        assert len(families) == 6
        assert set(families) == {os_name}

    def test_simulated_interaction(self, capsys):
        """Test interaction updates the text field and checkbox."""
        app = Application(LinuxUIFactory())
        app.create_ui()
        app.simulate_interaction()

        out = capsys.readouterr().out
        assert "Linux button 'OK' clicked" in out
        assert "Text field updated to: john_doe" in out
        assert "Checkbox 2 is now: checked" in out

    def test_text_field_value(self):
        """Test a text field stores the value it is given."""
        field = get_factory("macOS").create_text_field()
        assert field.get_value() == ""
        field.set_value("john_doe")
        assert field.get_value() == "john_doe"
        assert field.family() == "macOS"

    def test_render_windows_widgets(self, capsys):
        """Test rendering uses the Windows look."""
        app = Application(WindowsUIFactory())
        app.create_ui()
        app.render_ui()

        out = capsys.readouterr().out
        assert "[Windows TextField: Username]" in out
        assert "[Windows Button: Cancel]" in out


class TestDialog:
    """Test the minimal button and checkbox kit."""

    def test_windows_dialog(self, capsys):
        """Test a Windows dialog paints Windows widgets."""
        Dialog(WindowsFactory()).render()
        assert capsys.readouterr().out == "Rendering Windows Button\nRendering Windows Checkbox\n"

    def test_mac_dialog(self, capsys):
        """Test a Mac dialog paints Mac widgets."""
        Dialog(MacFactory()).render()
        assert capsys.readouterr().out == "Rendering Mac Button\nRendering Mac Checkbox\n"

    @pytest.mark.parametrize("factory", [WindowsFactory(), MacFactory()], ids=["windows", "mac"])
    def test_kit_products_share_factory_family(self, factory: GUIFactory):
        """Test both kit products report their factory's family."""
        assert factory.create_button().family() == factory.family()
        assert factory.create_checkbox().family() == factory.family()
        assert Dialog(factory).families() == [factory.family()] * 2

    def test_kit_families_differ(self):
        """Test the two kits are distinct families."""
        assert WindowsFactory().family() != MacFactory().family()
