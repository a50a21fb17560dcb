"""Tests for alert header construction."""

import logging

from utils import header_util


class TestEntityAlerts:
    def test_creation_alert_with_translation(self):
        headers = header_util.create_entity_creation_alert("crownApp", True, "delivery", "abc-1")

        assert headers == {
            "X-crownApp-alert": "crownApp.delivery.created",
            "X-crownApp-params": "abc-1",
        }

    def test_creation_alert_without_translation(self):
        headers = header_util.create_entity_creation_alert("crownApp", False, "delivery", "abc-1")

        assert headers["X-crownApp-alert"] == "A new delivery is created with identifier abc-1"

    def test_update_alert(self):
        assert header_util.create_entity_update_alert("app", True, "delivery", "7") == {
            "X-app-alert": "app.delivery.updated",
            "X-app-params": "7",
        }
        assert (
            header_util.create_entity_update_alert("app", False, "delivery", "7")["X-app-alert"]
            == "A delivery is updated with identifier 7"
        )

    def test_deletion_alert(self):
        assert header_util.create_entity_deletion_alert("app", True, "delivery", "7")["X-app-alert"] == "app.delivery.deleted"
        assert (
            header_util.create_entity_deletion_alert("app", False, "delivery", "7")["X-app-alert"]
            == "A delivery is deleted with identifier 7"
        )

    def test_param_is_form_url_encoded(self):
        headers = header_util.create_alert("app", "msg", "a b/c&d")

        assert headers["X-app-params"] == "a+b%2Fc%26d"


class TestFailureAlert:
    def test_failure_alert_with_translation(self):
        headers = header_util.create_failure_alert(
            "crownApp", True, "delivery", "idexists", "A new delivery cannot already have an ID"
        )

        assert headers == {
            "X-crownApp-error": "error.idexists",
            "X-crownApp-params": "delivery",
        }

    def test_failure_alert_without_translation_uses_default_message(self):
        headers = header_util.create_failure_alert("crownApp", False, "delivery", "idnull", "Invalid id")

        assert headers["X-crownApp-error"] == "Invalid id"

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="utils.header_util"):
            header_util.create_failure_alert("crownApp", True, "delivery", "idnull", "Invalid id")

        assert "Entity processing failed, Invalid id" in caplog.text
