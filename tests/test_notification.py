"""Tests for structured push message bodies."""

from mipush.schemas.notification import AndroidMessage, IOSMessage


class TestIOSMessage:
    def test_defaults(self):
        message = IOSMessage(title="Hello")
        assert message.badge == 1
        assert message.sound == "default"
        assert message.extras == {}
        assert message.body is None

    def test_body_defaults_to_description(self):
        message = IOSMessage(description="Something happened")
        assert message.body == "Something happened"

    def test_explicit_body_is_kept(self):
        message = IOSMessage(description="desc", body="body")
        assert message.body == "body"

    def test_to_params_drops_unset_fields(self):
        params = IOSMessage(title="Hello").to_params()
        assert params == {"title": "Hello", "badge": 1, "sound": "default", "extras": {}}

    def test_set_target_field(self):
        message = IOSMessage(title="Hello", extras={"url": "app://home"})
        message.set_target_field("alias", "bob")
        params = message.to_params()
        assert params["alias"] == "bob"
        assert params["extras"] == {"url": "app://home"}

    def test_set_target_field_replaces_previous_target(self):
        message = IOSMessage(title="Hello")
        message.set_target_field("alias", "bob")
        message.set_target_field("topic", "news")
        params = message.to_params()
        assert params["topic"] == "news"
        assert "alias" not in params


class TestAndroidMessage:
    def test_defaults(self):
        message = AndroidMessage(title="Hello", description="World")
        assert message.pass_through == 0
        assert message.notify_type == -1
        assert message.extras == {}

    def test_to_params(self):
        message = AndroidMessage(
            title="Hello",
            description="World",
            restricted_package_name="com.example.app",
            notify_id=3,
        )
        message.set_target_field("registration_id", "abc")
        assert message.to_params() == {
            "title": "Hello",
            "description": "World",
            "restricted_package_name": "com.example.app",
            "pass_through": 0,
            "notify_type": -1,
            "notify_id": 3,
            "extras": {},
            "registration_id": "abc",
        }


class TestIOSMessageExplicitNone:
    def test_none_badge_and_sound_use_defaults(self):
        message = IOSMessage(title="Hello", badge=None, sound=None, extras=None)
        assert message.badge == 1
        assert message.sound == "default"
        assert message.extras == {}

    def test_explicit_values_are_kept(self):
        message = IOSMessage(badge=5, sound="chime.caf")
        assert message.badge == 5
        assert message.sound == "chime.caf"
