from sprint_api.utils.headers import entity_creation_alert, entity_deletion_alert, failure_alert


def test_entity_creation_alert():
    assert entity_creation_alert("sprint", "4", app_name="demo") == {
        "X-demo-alert": "demo.sprint.created",
        "X-demo-params": "4",
    }


def test_entity_deletion_alert_uses_configured_app_name():
    assert entity_deletion_alert("sprint", "4")["X-sprintApi-alert"] == "sprintApi.sprint.deleted"


def test_failure_alert():
    assert failure_alert("sprint", "idnull", app_name="demo") == {
        "X-demo-error": "error.idnull",
        "X-demo-params": "sprint",
    }
