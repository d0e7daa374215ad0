"""Tests for the notification endpoints."""

from __future__ import annotations


def test_list_and_count(client, auth_headers) -> None:
    notifications = client.get("/api/notifications", headers=auth_headers).json()

    assert len(notifications) == 3
    assert all(item["isRead"] is False for item in notifications)
    assert client.get("/api/notifications/unread-count", headers=auth_headers).json() == {
        "count": 3
    }


def test_mark_one_as_read(client, auth_headers) -> None:
    response = client.put("/api/notifications/2/read", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["isRead"] is True
    assert client.get("/api/notifications/unread-count", headers=auth_headers).json() == {
        "count": 2
    }
    assert client.put("/api/notifications/40/read", headers=auth_headers).status_code == 404


def test_mark_all_as_read(client, auth_headers) -> None:
    response = client.put("/api/notifications/read-all", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "All notifications marked as read", "updated": 3}
    assert client.get("/api/notifications/unread-count", headers=auth_headers).json() == {
        "count": 0
    }
    again = client.put("/api/notifications/read-all", headers=auth_headers)
    assert again.json()["updated"] == 0


def test_other_users_cannot_read_foreign_notifications(client, login) -> None:
    client.post(
        "/api/users",
        json={
            "username": "sitiaminah",
            "password": "rahasia123",
            "nik": "3174000000000001",
            "fullName": "Siti Aminah",
        },
    )
    headers = login("sitiaminah", "rahasia123")

    assert client.get("/api/notifications", headers=headers).json() == []
    assert client.put("/api/notifications/1/read", headers=headers).status_code == 403
    assert client.put("/api/notifications/read-all", headers=headers).json()["updated"] == 0
