from datetime import datetime, timedelta

from conftest import PASSWORD
from interview_scheduler.core.config import settings
from interview_scheduler.models import IntervieweeStatus, TenantRole
from interview_scheduler.services.intervals import day_of_week

API = settings.API_V1_STR


def _next_day(days=3):
    return (datetime.utcnow() + timedelta(days=days)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )


def test_health(client):
    response = client.get(f"{API}/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_register_login_and_me(client):
    response = client.post(
        f"{API}/auth/register",
        json={"email": "New.User@Example.com", "full_name": "New User", "password": PASSWORD},
    )
    assert response.status_code == 201
    assert response.json()["email"] == "new.user@example.com"

    duplicate = client.post(
        f"{API}/auth/register",
        json={"email": "new.user@example.com", "password": PASSWORD},
    )
    assert duplicate.status_code == 400

    tokens = client.post(
        f"{API}/auth/login", json={"email": "new.user@example.com", "password": PASSWORD}
    ).json()
    me = client.get(
        f"{API}/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["full_name"] == "New User"

    refreshed = client.post(f"{API}/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert refreshed.status_code == 200

    # An access token is not accepted as a refresh token
    bad = client.post(f"{API}/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert bad.status_code == 401


def test_login_with_wrong_password(client, interviewer):
    response = client.post(
        f"{API}/auth/login", json={"email": interviewer.email, "password": "wrong-password"}
    )
    assert response.status_code == 400


def test_create_tenant_makes_creator_admin(client, make_user, auth_headers):
    owner = make_user(email="owner@example.com")

    response = client.post(f"{API}/tenants/", json={"name": "Globex"}, headers=auth_headers(owner))
    assert response.status_code == 201
    tenant_id = response.json()["id"]

    listed = client.get(f"{API}/tenants/", headers=auth_headers(owner)).json()
    assert [(t["id"], t["role"]) for t in listed] == [(tenant_id, "ADMIN")]

    settings_response = client.get(
        f"{API}/settings/", headers={**auth_headers(owner), "X-Tenant-ID": tenant_id}
    )
    assert settings_response.status_code == 200
    assert settings_response.json()["is_default"] is False
    assert settings_response.json()["max_schedules_per_day"] == 3


def test_admin_adds_member(client, session, make_user, tenant, add_member, auth_headers):
    admin = make_user(email="admin@example.com")
    add_member(admin, tenant, TenantRole.ADMIN)
    recruit = make_user(email="recruit@example.com")

    response = client.post(
        f"{API}/tenants/{tenant.id}/members",
        json={"email": "recruit@example.com", "role": "INTERVIEWER"},
        headers=auth_headers(admin),
    )
    assert response.status_code == 201
    assert response.json()["user_id"] == str(recruit.id)

    forbidden = client.post(
        f"{API}/tenants/{tenant.id}/members",
        json={"email": "admin@example.com", "role": "HR"},
        headers=auth_headers(recruit),
    )
    assert forbidden.status_code == 403


def test_tenant_header_is_required(client, interviewer, tenant, make_user, auth_headers):
    missing = client.get(f"{API}/availability/", headers=auth_headers(interviewer))
    assert missing.status_code == 400

    outsider = make_user(email="outsider@example.com")
    forbidden = client.get(f"{API}/availability/", headers=auth_headers(outsider, tenant))
    assert forbidden.status_code == 403

    anonymous = client.get(f"{API}/availability/", headers={"X-Tenant-ID": str(tenant.id)})
    assert anonymous.status_code == 401


def test_availability_round_trip(client, interviewer, tenant, auth_headers):
    headers = auth_headers(interviewer, tenant)
    payload = {
        "availability_slots": [
            {"day_of_week": 3, "start_time": "13:00", "end_time": "15:00"},
            {"day_of_week": 1, "start_time": "09:00", "end_time": "12:00"},
        ],
        "exception_dates": [{"exception_date": "2030-01-08", "is_blocked": True}],
    }

    response = client.put(f"{API}/availability/", json=payload, headers=headers)
    assert response.status_code == 200

    body = client.get(f"{API}/availability/", headers=headers).json()
    assert [slot["day_of_week"] for slot in body["availability_slots"]] == [1, 3]
    assert body["exception_dates"][0]["exception_date"] == "2030-01-08"

    invalid = client.put(
        f"{API}/availability/",
        json={"availability_slots": [{"day_of_week": 1, "start_time": "12:00", "end_time": "09:00"}]},
        headers=headers,
    )
    assert invalid.status_code == 400
    assert invalid.json()["code"] == "validation_error"
    assert len(client.get(f"{API}/availability/", headers=headers).json()["availability_slots"]) == 2


def test_settings_defaults_and_update(client, interviewer, tenant, auth_headers):
    headers = auth_headers(interviewer, tenant)

    defaults = client.get(f"{API}/settings/", headers=headers).json()
    assert defaults == {
        "meeting_duration": 30,
        "buffer_between_events": 15,
        "max_schedules_per_day": 3,
        "advance_booking_days": 30,
        "is_default": True,
    }

    updated = client.put(
        f"{API}/settings/",
        json={
            "meeting_duration": 45,
            "buffer_between_events": 10,
            "max_schedules_per_day": 4,
            "advance_booking_days": 14,
        },
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["meeting_duration"] == 45
    assert updated.json()["is_default"] is False

    invalid = client.put(
        f"{API}/settings/",
        json={
            "meeting_duration": 1,
            "buffer_between_events": 10,
            "max_schedules_per_day": 4,
            "advance_booking_days": 14,
        },
        headers=headers,
    )
    assert invalid.status_code == 422


def test_slots_then_booking_flow(client, interviewer, tenant, add_window, configure):
    day = _next_day()
    configure(interviewer, tenant, meeting_duration=30, buffer_between_events=0)
    add_window(interviewer, tenant, day_of_week(day.date()), "10:00", "11:00")
    params = {
        "tenant_id": str(tenant.id),
        "start_date": day.date().isoformat(),
        "end_date": day.date().isoformat(),
    }

    response = client.get(f"{API}/available-slots/{interviewer.id}", params=params)
    assert response.status_code == 200
    body = response.json()
    assert body["interviewer"]["name"] == "Ada Lovelace"
    assert body["interviewer"]["meeting_duration"] == 30
    slots = body["available_slots"]
    assert [slot["start_time"] for slot in slots] == [
        day.replace(hour=10).isoformat(),
        day.replace(hour=10, minute=30).isoformat(),
    ]

    booking = client.post(
        f"{API}/bookings/",
        json={
            "interviewer_id": str(interviewer.id),
            "tenant_id": str(tenant.id),
            "start_time": slots[0]["start_time"],
            "end_time": slots[0]["end_time"],
            "interviewee_name": "Alan Turing",
            "interviewee_email": "alan@example.com",
        },
    )
    assert booking.status_code == 201
    assert booking.json()["status"] == "CONFIRMED"

    again = client.post(
        f"{API}/bookings/",
        json={
            "interviewer_id": str(interviewer.id),
            "start_time": slots[0]["start_time"],
            "end_time": slots[0]["end_time"],
            "interviewee_name": "Someone Else",
            "interviewee_email": "else@example.com",
        },
        headers={"X-Tenant-ID": str(tenant.id)},
    )
    assert again.status_code == 409
    assert again.json()["code"] == "slot_conflict"

    remaining = client.get(f"{API}/available-slots/{interviewer.id}", params=params).json()
    assert [slot["id"] for slot in remaining["available_slots"]] == [slots[1]["id"]]


def test_slots_for_unknown_interviewer(client, make_user, tenant):
    stranger = make_user(email="stranger@example.com")
    response = client.get(
        f"{API}/available-slots/{stranger.id}", params={"tenant_id": str(tenant.id)}
    )
    assert response.status_code == 404
    assert response.json() == {"detail": "Interviewer not found", "code": "not_found"}


def test_booking_requires_tenant(client, interviewer):
    day = _next_day()
    response = client.post(
        f"{API}/bookings/",
        json={
            "interviewer_id": str(interviewer.id),
            "start_time": day.replace(hour=10).isoformat(),
            "end_time": day.replace(hour=10, minute=30).isoformat(),
            "interviewee_name": "Alan Turing",
            "interviewee_email": "alan@example.com",
        },
    )
    assert response.status_code == 400


def test_capacity_rejection_over_http(client, interviewer, tenant, configure, add_booking):
    day = _next_day()
    configure(interviewer, tenant, max_schedules_per_day=1)
    add_booking(interviewer, tenant, day.replace(hour=9), day.replace(hour=9, minute=30))

    response = client.post(
        f"{API}/bookings/",
        json={
            "interviewer_id": str(interviewer.id),
            "tenant_id": str(tenant.id),
            "start_time": day.replace(hour=15).isoformat(),
            "end_time": day.replace(hour=15, minute=30).isoformat(),
            "interviewee_name": "Alan Turing",
            "interviewee_email": "alan@example.com",
        },
    )
    assert response.status_code == 409
    assert response.json()["code"] == "capacity_exceeded"


def test_list_and_cancel_bookings(
    client, interviewer, hr_user, tenant, make_user, add_member, add_booking, auth_headers
):
    day = _next_day()
    booking = add_booking(interviewer, tenant, day.replace(hour=9), day.replace(hour=9, minute=30))

    listed = client.get(f"{API}/bookings/", headers=auth_headers(interviewer, tenant)).json()
    assert [item["id"] for item in listed] == [str(booking.id)]

    colleague = make_user(email="colleague@example.com")
    add_member(colleague, tenant, TenantRole.INTERVIEWER)
    forbidden = client.post(
        f"{API}/bookings/{booking.id}/cancel", headers=auth_headers(colleague, tenant)
    )
    assert forbidden.status_code == 403

    cancelled = client.post(
        f"{API}/bookings/{booking.id}/cancel", headers=auth_headers(hr_user, tenant)
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "CANCELLED"

    twice = client.post(
        f"{API}/bookings/{booking.id}/cancel", headers=auth_headers(interviewer, tenant)
    )
    assert twice.status_code == 409
    assert twice.json()["code"] == "invalid_state"


def test_interviewee_pipeline_over_http(client, session, interviewer, hr_user, tenant, auth_headers):
    hr_headers = auth_headers(hr_user, tenant)

    created = client.post(
        f"{API}/interviewees/",
        json={"name": "Alan Turing", "email": "Alan@Example.com", "skills": "math"},
        headers=hr_headers,
    )
    assert created.status_code == 201
    interviewee_id = created.json()["id"]
    assert created.json()["status"] == "NEW"

    duplicate = client.post(
        f"{API}/interviewees/",
        json={"name": "Alan Again", "email": "alan@example.com"},
        headers=hr_headers,
    )
    assert duplicate.status_code == 400

    # Interviewers may move candidates but not create them
    denied = client.post(
        f"{API}/interviewees/",
        json={"name": "Other", "email": "other@example.com"},
        headers=auth_headers(interviewer, tenant),
    )
    assert denied.status_code == 403

    contacted = client.patch(
        f"{API}/interviewees/{interviewee_id}/status",
        json={"status": "CONTACTED"},
        headers=auth_headers(interviewer, tenant),
    )
    assert contacted.status_code == 200
    assert contacted.json()["status"] == "CONTACTED"

    day = _next_day()
    booking = client.post(
        f"{API}/bookings/",
        json={
            "interviewer_id": str(interviewer.id),
            "tenant_id": str(tenant.id),
            "interviewee_id": interviewee_id,
            "start_time": day.replace(hour=10).isoformat(),
            "end_time": day.replace(hour=10, minute=30).isoformat(),
            "interviewee_name": "Alan Turing",
            "interviewee_email": "alan@example.com",
        },
    )
    assert booking.status_code == 201

    passed = client.patch(
        f"{API}/interviewees/{interviewee_id}/status",
        json={"round_result": "PASS"},
        headers=hr_headers,
    )
    assert passed.json()["status"] == IntervieweeStatus.IN_PROGRESS.value
    assert passed.json()["current_round"] == 2

    both = client.patch(
        f"{API}/interviewees/{interviewee_id}/status",
        json={"status": "REJECTED", "round_result": "FAIL"},
        headers=hr_headers,
    )
    assert both.status_code == 400

    note = client.post(
        f"{API}/interviewees/{interviewee_id}/notes",
        json={"content": "Great communicator"},
        headers=hr_headers,
    )
    assert note.status_code == 201

    detail = client.get(f"{API}/interviewees/{interviewee_id}", headers=hr_headers).json()
    contents = [item["content"] for item in detail["notes"]]
    assert contents[0] == "[SYSTEM] Status changed from NEW to CONTACTED"
    assert contents[1].startswith("[SYSTEM] Interview scheduled with Ada Lovelace")
    assert contents[-1] == "Great communicator"

    searched = client.get(
        f"{API}/interviewees/", params={"search": "turing"}, headers=hr_headers
    ).json()
    assert [item["id"] for item in searched] == [interviewee_id]
    assert client.get(
        f"{API}/interviewees/", params={"status": "REJECTED"}, headers=hr_headers
    ).json() == []


def test_interviewee_from_other_tenant_is_hidden(
    client, make_user, hr_user, tenant, make_interviewee, auth_headers, session
):
    from interview_scheduler.models import Tenant, TenantUser

    interviewee = make_interviewee()
    other = Tenant(name="Other Co")
    session.add(other)
    session.commit()
    session.add(TenantUser(user_id=hr_user.id, tenant_id=other.id, role=TenantRole.HR))
    session.commit()

    response = client.get(
        f"{API}/interviewees/{interviewee.id}", headers=auth_headers(hr_user, other)
    )
    assert response.status_code == 404
