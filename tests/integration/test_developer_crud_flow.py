"""开发者增删改查的端到端流程."""

import pytest

from devroster.models.developer import Developer, Gender


def _stored(app) -> list[Developer]:
    with app.app_context():
        return list(Developer.query.order_by(Developer.id).all())


@pytest.mark.integration
def test_insert_update_delete_round_trip(app, client):
    created = client.post(
        "/demo/insertDev.do",
        data={"name": "Kim", "career": "3", "email": "kim@example.com", "gender": "MALE", "lang": ["Java", "C"]},
        follow_redirects=True,
    )
    assert created.status_code == 200
    assert b"creation succeeded" in created.data

    stored = _stored(app)
    assert len(stored) == 1
    dev_id = stored[0].id
    assert stored[0].gender is Gender.MALE
    assert stored[0].languages == ["Java", "C"]

    listing = client.get("/demo/devList.do")
    assert b"kim@example.com" in listing.data

    form = client.get(f"/demo/updateDev.do?no={dev_id}")
    assert form.status_code == 200
    assert b'value="Kim"' in form.data

    updated = client.post(
        "/demo/updateDev.do",
        data={"id": str(dev_id), "name": "Kim", "career": "4", "email": "kim@example.com", "lang": "Python"},
        follow_redirects=True,
    )
    assert updated.status_code == 200
    assert b"update succeeded" in updated.data
    assert _stored(app)[0].career == 4
    assert _stored(app)[0].gender is None
    assert _stored(app)[0].languages == ["Python"]

    deleted = client.post("/demo/deleteDev.do", data={"no": str(dev_id)}, follow_redirects=True)
    assert deleted.status_code == 200
    assert b"deletion succeeded" in deleted.data
    assert _stored(app) == []


@pytest.mark.integration
def test_invalid_submission_persists_nothing(app, client):
    response = client.post(
        "/demo/insertDev.do",
        data={"name": "Kim", "career": "abc", "email": "kim@example.com"},
    )

    assert response.status_code == 400
    assert _stored(app) == []


@pytest.mark.integration
@pytest.mark.parametrize(
    ("method", "path", "data"),
    [
        ("post", "/demo/insertDev.do", {"name": "Kim", "career": "99999999999999999999", "email": "kim@example.com"}),
        ("get", "/demo/updateDev.do?no=99999999999999999999", None),
        ("post", "/demo/deleteDev.do", {"no": "99999999999999999999"}),
    ],
)
def test_out_of_range_integers_are_client_errors(app, client, method, path, data):
    response = getattr(client, method)(path, data=data)

    assert response.status_code == 400
    assert response.get_json()["category"] == "validation"
    assert _stored(app) == []
