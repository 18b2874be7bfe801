"""Tests for the colleague mediator and the login dialog."""
from pattern_catalogue.patterns.behavioral.mediator.colleagues import Colleague, ConcreteMediator
from pattern_catalogue.patterns.behavioral.mediator.dialog import AuthDialog


class TestConcreteMediator:
    """Test broadcast delivery."""

    def setup_method(self):
        """Set up three colleagues on one mediator."""
        self.mediator = ConcreteMediator()
        self.first = Colleague(self.mediator, 1)
        self.second = Colleague(self.mediator, 2)
        self.third = Colleague(self.mediator, 3)

    def test_sender_does_not_hear_itself(self):
        """Test every colleague but the sender receives the message once."""
        self.first.send("hi!")
        assert self.first.received == []
        assert self.second.received == ["hi!"]
        assert self.third.received == ["hi!"]

    def test_transcript_order(self, capsys):
        """Test delivery follows registration order."""
        self.third.send("yeah")
        assert capsys.readouterr().out == (
            "3 Sent message yeah\n"
            "1 Got message yeah\n"
            "2 Got message yeah\n"
        )

    def test_duplicate_registration_ignored(self):
        """Test adding a colleague twice keeps one registration."""
        self.mediator.add(self.first)
        assert len(self.mediator.colleagues) == 3


class TestAuthDialog:
    """Test the rules linking the login widgets."""

    def setup_method(self):
        """Set up a fresh dialog."""
        self.dialog = AuthDialog()

    def test_initial_state(self):
        """Test dependent widgets start disabled."""
        assert not self.dialog.ok_button.enabled
        assert not self.dialog.password.enabled
        assert not self.dialog.user_list.enabled
        assert self.dialog.cancel_button.enabled
        assert self.dialog.ok_button.text == "Login"

    def test_typing_username_enables_login(self):
        """Test a non-empty username enables OK and the password field."""
        self.dialog.username.set_text("john")
        assert self.dialog.ok_button.enabled
        assert self.dialog.password.enabled

        self.dialog.username.set_text("")
        assert not self.dialog.ok_button.enabled

    def test_remember_me_adds_username(self):
        """Test checking remember-me enables the list and records the user."""
        self.dialog.username.set_text("john")
        self.dialog.remember.click()

        assert self.dialog.user_list.enabled
        assert self.dialog.clear_button.enabled
        assert self.dialog.user_list.items == ["john"]

    def test_selecting_user_fills_username(self):
        """Test picking a remembered user copies it into the username box."""
        self.dialog.user_list.set_text("alice")
        self.dialog.user_list.select_item(0)
        assert self.dialog.username.text == "alice"

    def test_clear_resets_form(self):
        """Test clearing empties the fields and unchecks remember-me."""
        self.dialog.username.set_text("john")
        self.dialog.password.set_text("secret")
        self.dialog.remember.click()
        self.dialog.clear_button.click()

        assert self.dialog.username.text == ""
        assert self.dialog.password.text == ""
        assert not self.dialog.remember.checked
        assert not self.dialog.user_list.enabled
        assert not self.dialog.ok_button.enabled

    def test_login_click(self, capsys):
        """Test clicking OK reports the user and password length."""
        self.dialog.username.set_text("john")
        self.dialog.password.set_text("secret")
        capsys.readouterr()
        self.dialog.ok_button.click()

        out = capsys.readouterr().out
        assert "Mediator received event 'click' from 'OK'" in out
        assert "Processing login for user: john" in out
        assert "Password length: 6 characters" in out
        assert out.endswith("---\n")
