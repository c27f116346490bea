from models.api_models import PLACEHOLDER_TEXT


def assert_error_body(response, status_code):
    """Assert a well-formed JSON error response with the given status."""
    assert response.status_code == status_code, response.text
    assert response.headers["content-type"].startswith("application/json")
    payload = response.json()
    assert isinstance(payload.get("error"), str) and payload["error"], f"No error message in {payload}"
    return payload


def assert_complete_content(content):
    """Assert every text field holds a string, never None or blank."""
    for field in ("about", "experience", "education", "skills"):
        value = getattr(content, field)
        assert isinstance(value, str) and value.strip(), f"'{field}' is empty"
    assert isinstance(content.projects, dict)
    assert isinstance(content.contact, dict)


def assert_placeholder(content, *fields):
    for field in fields:
        assert getattr(content, field) == PLACEHOLDER_TEXT, f"'{field}' is not the placeholder"
