"""Error Isolation — unexpected failures become a uniform 500.

Invariants:
    - Body is {message, name, description}; no traceback
    - Client errors (401/400/404) are never converted to 500
"""

from courses_api.infrastructure.repositories import SqlCourseRepository


async def test_unexpected_exception_becomes_500(client, monkeypatch):
    async def explode(self):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(SqlCourseRepository, "find_all", explode)

    res = await client.get("/courses")

    assert res.status_code == 500
    assert res.json() == {
        "message": "Sorry, there was an error",
        "name": "RuntimeError",
        "description": "disk on fire",
    }


async def test_failure_during_authenticated_write_becomes_500(
    client, seed_course, ada_auth, monkeypatch,
):
    async def explode(self, course):
        raise ValueError("cannot delete")

    monkeypatch.setattr(SqlCourseRepository, "delete", explode)

    res = await client.delete(f"/courses/{seed_course.id}", auth=ada_auth)

    assert res.status_code == 500
    assert res.json()["name"] == "ValueError"
    assert "Traceback" not in res.text


async def test_client_errors_pass_through_untouched(client):
    res = await client.get("/courses/404")
    assert res.status_code == 404


async def test_malformed_json_is_400_with_errors(client):
    res = await client.post(
        "/users", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert isinstance(res.json()["errors"], list)


async def test_unknown_route_uses_message_envelope(client):
    res = await client.get("/nope")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


async def test_readiness_probe_reports_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}
